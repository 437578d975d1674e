"""
Optional text-generation collaborator.

Callers must treat every failure as ``UnavailableError`` and fall back to a
fixed text. Nothing on a ledger path may depend on this module.
"""

import json
import logging

import google.generativeai as genai
from django.conf import settings

from apps.ledger.exceptions import UnavailableError

logger = logging.getLogger(__name__)


def generate_text(prompt: str, *, json_mode: bool = False):
    """
    Generate text (or a parsed JSON object) for ``prompt``.

    Raises:
        UnavailableError: If no API key is configured or the call fails
    """
    if not settings.GEMINI_API_KEY:
        raise UnavailableError('Text generation is not configured.')

    generation_config = {'response_mime_type': 'application/json'} if json_mode else None
    try:
        genai.configure(api_key=settings.GEMINI_API_KEY)
        model = genai.GenerativeModel(settings.GEMINI_MODEL)
        response = model.generate_content(
            prompt,
            generation_config=generation_config,
            request_options={'timeout': settings.GEMINI_TIMEOUT_SECONDS},
        )
        text = response.text.strip()
        return json.loads(text) if json_mode else text
    except Exception as exc:
        logger.warning('Text generation failed: %s', exc)
        raise UnavailableError() from exc
