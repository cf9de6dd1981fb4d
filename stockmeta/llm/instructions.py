"""
Vision Model Instructions

Fixed instruction texts sent alongside each image. The metadata
instruction defines the four-line schema the response parser expects;
the prompt instruction asks for a single image-generation prompt.
"""

from stockmeta.schemas.metadata import ProcessingMode
from stockmeta.taxonomy import DEFAULT_TAXONOMY, Taxonomy


def build_metadata_instructions(taxonomy: Taxonomy = DEFAULT_TAXONOMY) -> str:
    """Instruction text for metadata mode, listing the category names."""
    category_names = ", ".join(entry.name for entry in taxonomy.entries())
    return (
        "You are preparing metadata for Adobe Stock. Follow these strict rules:\n"
        "1) TITLE: Provide ONE concise, descriptive title (<= 200 characters). Use sentence case. "
        "No promo words, no hashtags, no camera model, no 'copy space', no 'stock photo', "
        "no 'and' lists. Prefer subject + key attribute + context. "
        "Example: 'Black briefcase vector icon on dark background'.\n"
        "2) KEYWORDS: Provide 25-49 relevant keywords (comma-separated). Order by importance "
        "(most important first). Use single words or short 2-3 word phrases. No brand names, "
        "no people names (unless clearly editorial), no city or country unless visually central, "
        "no duplicates, no stopwords, no fluff like 'copy space' or 'high quality'. "
        "Include: subject(s), actions, materials, style (e.g., vector, flat, outline), "
        "color aspects if central, and essential conceptual terms buyers would search. "
        "Do not add irrelevant topics.\n"
        f"3) CATEGORY: Choose exactly one from Adobe's official list: {category_names}.\n"
        "4) DESCRIPTION: One or two sentences, <= 500 characters.\n\n"
        "Return using this exact schema:\n"
        "TITLE: <your title>\n"
        "KEYWORDS: <k1, k2, k3, ...>\n"
        f"CATEGORY: <one of the {len(taxonomy)} official names>\n"
        "DESCRIPTION: <your description>\n"
    )


PROMPT_INSTRUCTIONS = (
    "Describe this image as a single detailed prompt for a text-to-image generator. "
    "Cover the subject, composition, setting, lighting, color palette, mood and visual "
    "style (photo, illustration, 3d render, vector). Do not mention the original image, "
    "brands or real people's names. Return one paragraph in the form:\n"
    "PROMPT: <your prompt>\n"
)


def instructions_for(mode: ProcessingMode, taxonomy: Taxonomy = DEFAULT_TAXONOMY) -> str:
    if mode == ProcessingMode.PROMPT:
        return PROMPT_INSTRUCTIONS
    return build_metadata_instructions(taxonomy)
