from pydantic import BaseModel
from typing import List, Optional

from kanaconv.nlp.base import SegmentationMode

class ConvertRequest(BaseModel):
    text: str = ""
    mode: Optional[SegmentationMode] = None  # search (default) or normal
    debug: bool = False

class TokenTrace(BaseModel):
    surface: str
    reading: str
    source: str  # reading, pronunciation or surface

class ConvertResponse(BaseModel):
    hiragana: str
    katakana: str
    romanji: str
    debug: Optional[List[TokenTrace]] = None  # only present when the request asked for it
