# dotrepl.completion - Tab completion module
from dotrepl.completion.chain import ChainSpec, extract
from dotrepl.completion.collector import MAX_CANDIDATES, CandidateEntry, collect
from dotrepl.completion.engine import CompletionEngine
from dotrepl.completion.renderer import (
    RenderAction,
    RenderKind,
    apply,
    format_listing,
    render,
)
from dotrepl.completion.resolver import Resolution, resolve

__all__ = [
    "ChainSpec",
    "extract",
    "Resolution",
    "resolve",
    "CandidateEntry",
    "MAX_CANDIDATES",
    "collect",
    "RenderAction",
    "RenderKind",
    "render",
    "format_listing",
    "apply",
    "CompletionEngine",
]
