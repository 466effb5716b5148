"""Declension API

Exposes full-name, word and phrase declension, gender lookup and paradigms.
Engine results are Result values; errors are raised through raise_result
and rendered by the registered AppError handler.
"""
from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel, Field

from core.errors.handlers import raise_result
from declension import CASE_LABELS, Case, DeclensionEngine, PartType

router = APIRouter()


def get_engine(request: Request) -> DeclensionEngine:
    """Engine built once at startup (see main.lifespan)."""
    return request.app.state.engine


class FullNameRequest(BaseModel):
    name: str = Field(..., min_length=1, examples=["Иванов Иван Иванович"])
    case: str = Field(..., examples=["ДП"])
    gender: str = ""


class WordRequest(BaseModel):
    word: str = Field(..., min_length=1)
    case: str
    part_type: str = PartType.FIRSTNAME
    gender: str = ""


class PhraseRequest(BaseModel):
    phrase: str = Field(..., min_length=1)
    case: str
    part_type: str
    gender: str = ""


class DeclensionResponse(BaseModel):
    result: str


class GenderResponse(BaseModel):
    word: str
    part_type: str
    gender: str


class ParadigmResponse(BaseModel):
    word: str
    part_type: str
    forms: dict[str, str]


class CaseResponse(BaseModel):
    label: str
    name: str


@router.post("/fio", response_model=DeclensionResponse)
async def decline_full_name(
    body: FullNameRequest, engine: DeclensionEngine = Depends(get_engine)
):
    """Decline "Surname Given Patronymic" into the requested case."""
    result = engine.decline_full_name(body.name, body.case, body.gender)
    raise_result(result)
    return DeclensionResponse(result=result.unwrap())


@router.post("/word", response_model=DeclensionResponse)
async def decline_word(body: WordRequest, engine: DeclensionEngine = Depends(get_engine)):
    """Decline a single word."""
    result = engine.decline_word(body.word, body.case, body.part_type, body.gender)
    raise_result(result)
    return DeclensionResponse(result=result.unwrap())


@router.post("/phrase", response_model=DeclensionResponse)
async def decline_phrase(body: PhraseRequest, engine: DeclensionEngine = Depends(get_engine)):
    """Decline every word of a whitespace-separated phrase."""
    result = engine.decline_phrase(body.phrase, body.case, body.part_type, body.gender)
    raise_result(result)
    return DeclensionResponse(result=result.unwrap())


@router.get("/gender", response_model=GenderResponse)
async def get_gender(
    word: str = Query(..., min_length=1),
    part_type: str = Query(PartType.FIRSTNAME),
    engine: DeclensionEngine = Depends(get_engine),
):
    """Infer gender from the word ending. Unknown gender is an empty string."""
    return GenderResponse(word=word, part_type=part_type, gender=engine.resolve_gender(word, part_type))


@router.get("/paradigm", response_model=ParadigmResponse)
async def get_paradigm(
    word: str = Query(..., min_length=1),
    part_type: str = Query(PartType.FIRSTNAME),
    engine: DeclensionEngine = Depends(get_engine),
):
    """All six case forms of a word."""
    result = engine.paradigm(word, part_type)
    raise_result(result)
    return ParadigmResponse(word=word, part_type=part_type, forms=result.unwrap())


@router.get("/cases", response_model=list[CaseResponse])
async def list_cases():
    """Accepted case labels, in declension order."""
    return [CaseResponse(label=label, name=Case(label).name.lower()) for label in CASE_LABELS]
