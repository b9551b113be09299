"""Google Gemini client used to write farm insights."""

import google.generativeai as genai

DEFAULT_MODEL = "gemini-2.5-flash"


class GeminiInsightGenerator:
    """Insight generator backed by a Gemini model."""

    def __init__(self, api_key: str, model_name: str = DEFAULT_MODEL):
        """Configure the Gemini client.

        Args:
            api_key: Google AI API key
            model_name: Gemini model to call
        """
        if not api_key:
            raise ValueError("A Gemini API key is required (set GEMINI_API_KEY)")
        genai.configure(api_key=api_key)
        self.model_name = model_name
        self._model = genai.GenerativeModel(model_name)

    def generate(self, prompt: str) -> str:
        """Send the prompt and return the response text."""
        response = self._model.generate_content(prompt)
        return response.text.strip()
