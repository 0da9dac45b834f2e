import logging

import requests
from django.conf import settings


class OpenAICompletionClient():
    def __init__(self):
        self.api_key = settings.OPENAI_API_KEY
        self.base_url = settings.OPENAI_BASE_URL.rstrip('/')
        self.model = settings.OPENAI_MODEL
        self.temperature = settings.OPENAI_TEMPERATURE
        self.timeout = settings.OPENAI_TIMEOUT

    def translate(self, system_prompt: str, text: str) -> str:
        """
        Send one line to the completion endpoint. On any failure the original text is returned unchanged.
        """
        try:
            response = requests.post(
                f"{self.base_url}/chat/completions",
                headers=self.__get_headers(),
                json=self.__get_payload(system_prompt, text),
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json()["choices"][0]["message"]["content"].strip()
        except requests.RequestException as e:
            logging.error("Error translating line: %s", e)
            return text
        except (KeyError, IndexError, TypeError, AttributeError, ValueError) as e:
            logging.error("Malformed completion response: %r", e)
            return text

    def __get_headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def __get_payload(self, system_prompt: str, text: str) -> dict:
        return {
            "model": self.model,
            "messages": [
                {
                    "role": "system",
                    "content": system_prompt
                },
                {
                    "role": "user",
                    "content": text
                }
            ],
            "temperature": self.temperature,
        }
