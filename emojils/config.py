"""
Runtime settings for the emoji language server.

Everything is read from environment variables once, when the server is
created. Missing API keys are not a startup error: the remote calls that
need them fail later and the responders fall back.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

TRANSLATE_API_KEY_ENV = "YANDEXTRANSLATE_API_KEY"
DICTIONARY_API_KEY_ENV = "DICTIONARY_API_KEY"
TARGET_LANGUAGE_ENV = "EMOJILS_TARGET_LANG"
HTTP_TIMEOUT_ENV = "EMOJILS_HTTP_TIMEOUT"
DEBUG_ENV = "DEBUG"

DEFAULT_TARGET_LANGUAGE = "ru"


@dataclass(frozen=True)
class Settings:
    """
    Server configuration.

    Attributes:
        translate_api_key: Key for the Yandex translation API
        dictionary_api_key: Key for the Merriam-Webster thesaurus API
        target_language: Language code words are translated into
        http_timeout: Seconds before an outbound request gives up.
                      None keeps the HTTP client's default.
        debug: Wait for a debugger before serving
    """

    translate_api_key: str | None = None
    dictionary_api_key: str | None = None
    target_language: str = DEFAULT_TARGET_LANGUAGE
    http_timeout: float | None = None
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """
        Build settings from environment variables.

        Raises:
            ValueError: If EMOJILS_HTTP_TIMEOUT is set but not a number
        """
        if environ is None:
            environ = os.environ

        timeout = environ.get(HTTP_TIMEOUT_ENV)
        http_timeout = None
        if timeout:
            try:
                http_timeout = float(timeout)
            except ValueError:
                raise ValueError(
                    f"{HTTP_TIMEOUT_ENV} must be a number of seconds, got {timeout!r}"
                ) from None

        return cls(
            translate_api_key=environ.get(TRANSLATE_API_KEY_ENV) or None,
            dictionary_api_key=environ.get(DICTIONARY_API_KEY_ENV) or None,
            target_language=environ.get(TARGET_LANGUAGE_ENV) or DEFAULT_TARGET_LANGUAGE,
            http_timeout=http_timeout,
            debug=bool(environ.get(DEBUG_ENV)),
        )

    def missing_keys(self) -> list[str]:
        """Names of the API key variables that are not set."""
        missing = []
        if not self.translate_api_key:
            missing.append(TRANSLATE_API_KEY_ENV)
        if not self.dictionary_api_key:
            missing.append(DICTIONARY_API_KEY_ENV)
        return missing
