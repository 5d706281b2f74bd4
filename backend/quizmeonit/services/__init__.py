"""Prompting, model access and response parsing."""

from .model_gateway import ModelGateway, get_model_gateway, model_gateway
from .response_extractor import Malformed, Ok, ShapeMismatch, extract_quiz, extract_topic

__all__ = [
    "ModelGateway",
    "get_model_gateway",
    "model_gateway",
    "Malformed",
    "Ok",
    "ShapeMismatch",
    "extract_quiz",
    "extract_topic",
]
