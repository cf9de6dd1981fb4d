"""
Environment Variables

Central list of the STOCKMETA_* variables the configuration manager reads.
Provider credentials (GEMINI_API_KEY, OPENAI_API_KEY, ANTHROPIC_API_KEY, OLLAMA_*) are
resolved by ``stockmeta.llm.config`` instead.
"""

from typing import Dict, List


class EnvironmentVariables:
    """Centralized environment variable definitions."""

    LLM_PROVIDER = "STOCKMETA_LLM_PROVIDER"
    LOG_LEVEL = "STOCKMETA_LOG_LEVEL"
    LOG_FILE = "STOCKMETA_LOG_FILE"
    OUTPUT_DIR = "STOCKMETA_OUTPUT_DIR"
    KEYWORD_MAX = "STOCKMETA_KEYWORD_MAX"
    KEYWORD_MIN = "STOCKMETA_KEYWORD_MIN"
    EXTRA_STOPWORDS = "STOCKMETA_EXTRA_STOPWORDS"

    @classmethod
    def get_all_variables(cls) -> List[str]:
        return list(cls.get_variable_documentation())

    @classmethod
    def get_variable_documentation(cls) -> Dict[str, str]:
        """Get documentation for all environment variables."""
        return {
            cls.LLM_PROVIDER: "Default vision provider (auto, cloud-gemini, cloud-openai, cloud-anthropic, local-ollama)",
            cls.LOG_LEVEL: "Default logging level (debug, info, warning, error)",
            cls.LOG_FILE: "Write logs to this file in addition to stderr",
            cls.OUTPUT_DIR: "Default directory for exported CSV and JSON files",
            cls.KEYWORD_MAX: "Maximum keywords per image (default: 49)",
            cls.KEYWORD_MIN: "Keyword count the backfill step aims for (default: 25)",
            cls.EXTRA_STOPWORDS: "Comma-separated terms never accepted as keywords",
        }
