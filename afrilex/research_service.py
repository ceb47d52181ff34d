"""Asks Gemini for the African cognates of a word."""
import json
import logging
import re

import google.generativeai as genai
from pydantic import ValidationError

from afrilex import config
from afrilex.models import ResearchResult

logger = logging.getLogger(__name__)


class ResearchError(Exception):
    pass


PROMPT_TEMPLATE = """
Perform deep linguistic research on the word "{word}".

CORE OBJECTIVE:
Map the etymological and phonetic cognates of this word across the African continent,
following the Cheikh Anta Diop and Theophile Obenga framework, which posits a genetic
relationship between Ancient Egyptian (Medu Neter) and modern Black African languages.

INSTRUCTIONS:
1. Target languages: provide translations in at least 30 distinct African languages.
   - MANDATORY: include Ancient Egyptian (Medu Neter/Kemetic), Coptic and Bambara (Mandingue).
   - Include a diverse set from: Wolof, Yoruba, Hausa, Swahili, Zulu, Amharic, Somali, Dinka, Akan, Fulani, etc.
2. Ancient Egyptian & Coptic: give the transliteration (e.g. 'nfr') and the reconstructed pronunciation.
3. Bambara (Mandingue): give the exact word and related words with the same meaning.
4. Phonetic analysis & grouping:
   - Look for shared roots using sound mutation rules (e.g. b/w/m, k/h, r/l).
   - Assign the same integer `similarityGroup` (1-10) to words forming a cognate cluster.
5. `linguisticAnalysis` must name the specific sound shifts observed.

Output strictly one JSON object of this shape, with no commentary:
{{
  "sourceWord": string,
  "translations": [
    {{"language": string, "translatedWord": string, "pronunciation": string,
      "family": string, "region": string, "similarityGroup": integer, "notes": string}}
  ],
  "linguisticAnalysis": string
}}
"""

_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")


def build_prompt(word):
    return PROMPT_TEMPLATE.format(word=word)


def parse_response(text):
    """Validates the model's JSON reply into a ResearchResult."""
    if not text or not text.strip():
        raise ResearchError("No response text received from Gemini.")
    cleaned = _FENCE.sub("", text.strip())
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ResearchError(f"Gemini returned invalid JSON: {e}") from e
    try:
        return ResearchResult.model_validate(payload)
    except ValidationError as e:
        raise ResearchError(f"Gemini returned an unexpected structure: {e}") from e


def search_cognates(word, api_key=None, model_name=None):
    word = (word or "").strip()
    if not word:
        raise ResearchError("Word is required")
    api_key = api_key or config.api_key()
    if not api_key:
        raise ResearchError("No Gemini API key. Set GEMINI_API_KEY or enter one in the search panel.")
    model_name = model_name or config.model_name()

    logger.info("Researching %r with %s", word, model_name)
    genai.configure(api_key=api_key)
    model = genai.GenerativeModel(
        model_name,
        generation_config={"response_mime_type": "application/json"},
    )
    try:
        response = model.generate_content(build_prompt(word))
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        raise ResearchError(_describe_api_error(e)) from e

    # Blocked replies and empty candidates raise from the accessor itself
    try:
        text = response.text
    except ValueError as e:
        logger.error("Gemini returned no usable text: %s", e)
        raise ResearchError(f"No response text received from Gemini: {e}") from e

    result = parse_response(text)
    logger.info("Received %d translations for %r", len(result.translations), result.source_word)
    return result


def _describe_api_error(error):
    error_str = str(error)
    if "404" in error_str and "not found" in error_str:
        try:
            available_models = [
                m.name for m in genai.list_models()
                if "generateContent" in m.supported_generation_methods
            ]
            error_str += "\n\nAvailable models for your key:\n" + "\n".join(available_models)
            error_str += "\n\nPlease copy one of these into the 'Model' field."
        except Exception as list_err:
            error_str += f"\n\n(Could not list models: {list_err})"
    return error_str
