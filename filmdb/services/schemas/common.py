# filmdb/services/schemas/common.py
from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator


def _not_blank(v: str) -> str:
    if not v.strip():
        raise ValueError("must not be blank")
    return v


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]
