"""
OpenAI-backed farming advisor: free-text answers for expert queries and
image analysis for pest and disease identification.
"""
import json
import logging

import openai
from django.conf import settings

logger = logging.getLogger(__name__)

EXPERT_SYSTEM_PROMPT = (
    "You are an expert agricultural consultant with years of experience helping farmers. "
    "Provide practical, actionable advice for farming questions. Be specific about:\n"
    "- Crop varieties and growing conditions\n"
    "- Pest and disease management\n"
    "- Irrigation and soil management\n"
    "- Market and business advice\n"
    "- Government schemes and subsidies\n\n"
    "Keep responses helpful but concise (under 500 words)."
)

PEST_SYSTEM_PROMPT = (
    "You are an expert agricultural AI assistant specializing in pest and disease identification. "
    "Analyze the uploaded image and provide:\n"
    "1. Identification of the pest/disease (if any)\n"
    "2. Severity level (low/medium/high)\n"
    "3. Treatment recommendations\n"
    "4. Prevention measures\n\n"
    "Return response in JSON format:\n"
    "{\n"
    '  "identified": true/false,\n'
    '  "pest_name": "name of pest/disease",\n'
    '  "severity": "low/medium/high",\n'
    '  "confidence": 0.85,\n'
    '  "treatment": "treatment recommendations",\n'
    '  "prevention": "prevention measures",\n'
    '  "crop_specific_advice": "specific advice for this crop"\n'
    "}"
)


class AdvisoryServiceError(Exception):
    """The AI provider failed or returned nothing usable."""


class AdvisoryRateLimited(AdvisoryServiceError):
    """The AI provider is throttling requests."""


def fallback_identification(raw_text):
    return {
        'identified': False,
        'pest_name': 'Analysis incomplete',
        'severity': 'medium',
        'confidence': 0.5,
        'treatment': raw_text,
        'prevention': 'Regular monitoring recommended',
        'crop_specific_advice': 'Consult local agricultural expert',
    }


def parse_identification(content):
    """Parse the model's JSON verdict, falling back to a generic one on bad JSON."""
    try:
        parsed = json.loads(content)
    except (TypeError, ValueError):
        logger.warning("Pest identification answer was not valid JSON")
        return fallback_identification(content)

    if not isinstance(parsed, dict):
        return fallback_identification(content)
    return parsed


class AdvisoryClient:
    def __init__(self, api_key=None, chat_model=None, vision_model=None, timeout=None):
        self.client = openai.OpenAI(
            api_key=api_key or settings.OPENAI_API_KEY,
            timeout=timeout or settings.EXTERNAL_API_TIMEOUT * 3,
        )
        self.chat_model = chat_model or settings.OPENAI_CHAT_MODEL
        self.vision_model = vision_model or settings.OPENAI_VISION_MODEL

    def _complete(self, **kwargs):
        try:
            response = self.client.chat.completions.create(**kwargs)
        except openai.RateLimitError as exc:
            logger.warning("OpenAI rate limit hit: %s", exc)
            raise AdvisoryRateLimited(str(exc)) from exc
        except openai.OpenAIError as exc:
            logger.error("OpenAI request failed: %s", exc)
            raise AdvisoryServiceError(str(exc)) from exc

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise AdvisoryServiceError("Failed to get AI analysis")
        return content

    def answer_question(self, question, category='general'):
        return self._complete(
            model=self.chat_model,
            messages=[
                {'role': 'system', 'content': EXPERT_SYSTEM_PROMPT},
                {'role': 'user', 'content': f"Category: {category or 'general'}\nQuestion: {question}"},
            ],
            max_tokens=800,
            temperature=0.7,
        )

    def identify_pest(self, image_data_url, description=''):
        content = self._complete(
            model=self.vision_model,
            messages=[
                {'role': 'system', 'content': PEST_SYSTEM_PROMPT},
                {
                    'role': 'user',
                    'content': [
                        {
                            'type': 'text',
                            'text': (
                                "Please analyze this crop image for pests or diseases. "
                                f"Additional description: {description or 'No additional description provided'}"
                            ),
                        },
                        {'type': 'image_url', 'image_url': {'url': image_data_url}},
                    ],
                },
            ],
            max_tokens=1000,
        )
        return parse_identification(content)
