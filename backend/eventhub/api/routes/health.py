from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

@router.get("/", response_class=PlainTextResponse)
def welcome():
    return "Welcome to EventHub API"

@router.get("/health")
def health():
    return {"status": "ok"}
