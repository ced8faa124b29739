"""Reaction use cases."""

from .common import ReactionItem
from .get_reaction import GetReactionRequest, GetReactionResponse, GetReactionUseCase
from .remove_reaction import RemoveReactionRequest, RemoveReactionUseCase
from .set_reaction import SetReactionRequest, SetReactionResponse, SetReactionUseCase
from .toggle_reaction import (
    ToggleReactionRequest,
    ToggleReactionResponse,
    ToggleReactionUseCase,
)

__all__ = [
    "GetReactionRequest",
    "GetReactionResponse",
    "GetReactionUseCase",
    "ReactionItem",
    "RemoveReactionRequest",
    "RemoveReactionUseCase",
    "SetReactionRequest",
    "SetReactionResponse",
    "SetReactionUseCase",
    "ToggleReactionRequest",
    "ToggleReactionResponse",
    "ToggleReactionUseCase",
]
