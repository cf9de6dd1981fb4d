"""
Centralized Help Text Constants

CLI help text for commands and options, plus the process exit codes used
by every subcommand.
"""


class ExitCodes:
    SUCCESS = 0
    GENERAL_ERROR = 1
    MISSING_REQUIRED_OPTION = 2
    INVALID_CONFIGURATION = 3
    PROVIDER_NOT_AVAILABLE = 4
    PARTIAL_FAILURE = 5
    FILE_NOT_FOUND = 6


# Command help texts
GENERATE_HELP = "Send images to a vision model and export marketplace metadata or prompts."
PROCESS_HELP = "Post-process a saved model response into metadata without calling any model."
CATEGORIES_HELP = "List the marketplace category taxonomy."

# Option help texts
PROVIDER_HELP = (
    "Vision provider to use:\n"
    "  cloud-gemini: Google Gemini vision models (requires GEMINI_API_KEY)\n"
    "  cloud-openai: OpenAI vision models (requires OPENAI_API_KEY)\n"
    "  cloud-anthropic: Claude vision models (requires ANTHROPIC_API_KEY)\n"
    "  local-ollama: Local Ollama vision model such as llava\n"
    "  auto: First available provider (default)"
)

MODE_HELP = (
    "What to generate: 'metadata' (title, keywords, category) or "
    "'prompt' (an image-generation prompt per image)."
)

TARGET_EXTENSION_HELP = (
    "Replace the image extension in the CSV Filename column, e.g. '.eps' when "
    "uploading the vector originals of analysed previews. Default: keep original."
)

OUTPUT_HELP = (
    "Output file. Metadata mode writes CSV, prompt mode writes JSON. "
    "Defaults to <extension>_metadata.csv or prompts.json in the output directory."
)

CONFIG_HELP = "Path to a YAML configuration file (overrides ~/.stockmeta and ./.stockmeta)."

KEYWORD_MAX_HELP = "Maximum number of keywords per image (default: 49)."

KEYWORD_MIN_HELP = "Keyword count the backfill step aims for (default: 25)."
