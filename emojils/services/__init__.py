"""Clients for the remote web services the server talks to."""
from .base import Failure, RemoteServiceError, ServiceResult, Success
from .dictionary import DictionaryEntry, ThesaurusClient
from .emoji import Emoji, EmojidexClient
from .translate import YandexTranslateClient

__all__ = [
    'DictionaryEntry',
    'Emoji',
    'EmojidexClient',
    'Failure',
    'RemoteServiceError',
    'ServiceResult',
    'Success',
    'ThesaurusClient',
    'YandexTranslateClient',
]
