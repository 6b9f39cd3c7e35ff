from typing import Any

from PyLocaleSync.Helpers.Localization import get_language_name

default_prompt_template = "Translate the following text from {source_language} to {target_language}. Only respond with the translated text, nothing else.\n\nText: {text}"

default_instructions = "You are translating user interface messages for a software application. Preserve placeholders in curly braces and any markup exactly as they appear."

class TranslationPrompt:
    """
    The request sent to a provider to translate one message
    """
    def __init__(self, text : str, source_language : str, target_language : str, prompt_template : str|None = None, instructions : str|None = None):
        self.text : str = text
        self.source_language : str = source_language
        self.target_language : str = target_language
        self.prompt_template : str = prompt_template or default_prompt_template
        self.instructions : str|None = instructions
        self.content : str = self._build_content()

    @property
    def messages(self) -> list[dict[str, Any]]:
        """ Chat-style messages for providers that accept a conversation """
        messages = []
        if self.instructions:
            messages.append({ 'role': 'system', 'content': self.instructions })
        messages.append({ 'role': 'user', 'content': self.content })
        return messages

    def _build_content(self) -> str:
        return self.prompt_template.format(
            source_language=get_language_name(self.source_language),
            target_language=get_language_name(self.target_language),
            text=self.text
        )
