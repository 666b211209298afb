"""Application layer: the option loading engine and its collaborators."""

from asyncselect.application.load_controller import LoadController, LoadRequest, RequestOutcome
from asyncselect.application.normalizer import InputNormalizer, normalize, remove_diacritics
from asyncselect.application.projector import PresentationProjector, SelectProps
from asyncselect.application.reducer import extract_options, reduce_page
from asyncselect.application.result_cache import ResultCache
from asyncselect.application.selection_gate import SelectionGate, should_clear
from asyncselect.application.session import AsyncSelectSession

__all__ = [
    "AsyncSelectSession",
    "InputNormalizer",
    "LoadController",
    "LoadRequest",
    "PresentationProjector",
    "RequestOutcome",
    "ResultCache",
    "SelectProps",
    "SelectionGate",
    "extract_options",
    "normalize",
    "reduce_page",
    "remove_diacritics",
    "should_clear",
]
