# File: resume_layout/schemas/document.py
from pydantic import BaseModel, Field
from typing import List, Literal, Optional, Tuple, Union

DocumentType = Literal["resume", "cover-letter", "email"]


class ClassifyRequest(BaseModel):
    content: str = ""
    normalize: bool = False  # apply ATS normalization before classifying


class SectionResponse(BaseModel):
    kind: str
    raw_text: str
    ordinal: int


class ClassifyResponse(BaseModel):
    sections: List[SectionResponse]
    vocabulary_version: str


class PreviewRequest(BaseModel):
    content: str = ""


class SpanResponse(BaseModel):
    text: str
    emphasis: Optional[str] = None
    highlight: Optional[str] = None
    link: Optional[str] = None


class BlockResponse(BaseModel):
    ordinal: int
    kind: str
    role: str
    spans: List[SpanResponse]


class PreviewResponse(BaseModel):
    blocks: List[BlockResponse]
    html: str


class ExportRequest(BaseModel):
    content: str = ""
    document_type: DocumentType = "resume"
    # Paper name understood by PyMuPDF ("a4", "letter", "a4-l") or [width, height] in points
    page_size: Optional[Union[str, Tuple[float, float]]] = None
    margin: Optional[float] = Field(default=None, ge=0)
    country: Optional[str] = None


class ExtractResponse(BaseModel):
    filename: Optional[str] = None
    content: str
    characters: int
