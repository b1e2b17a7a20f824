"""
Pig latin text transformer.
Moves the leading consonants of each word to its end and appends 'ay';
words starting with a vowel get 'yay' instead.
"""

from typing import List

VOWELS = "aeiou"


class PigLatinTranslator:
    def __init__(self, case_sensitive: bool = True):
        """
        Initialize Pig Latin Translator.

        Args:
            case_sensitive: If True only lowercase vowels count as vowels
        """
        self.case_sensitive = case_sensitive

    def is_vowel(self, char: str) -> bool:
        if not self.case_sensitive:
            char = char.lower()
        return char in VOWELS

    def translate_word(self, word: str) -> str:
        """
        Translate a single word.

        Examples:
            'apple' -> 'appleyay'
            'relaxing' -> 'elaxingray'
            'box' -> 'oxbay'
        """
        if not word:
            return word

        if self.is_vowel(word[0]):
            return word + "yay"

        for index, char in enumerate(word):
            if self.is_vowel(char):
                return word[index:] + word[:index] + "ay"

        # No vowel at all
        return word + "ay"

    def translate_words(self, text: str) -> List[str]:
        return [self.translate_word(word) for word in text.split()]

    def translate(self, text: str) -> str:
        """Translate every whitespace-separated word, joined by single spaces."""
        return " ".join(self.translate_words(text))
