from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pathlib import Path
import json
import os

app = FastAPI(title="Mock RentLedger API", version="1.0.0")
# Support both local development and Docker
DATA_DIR = Path("/api_stub") if os.path.exists("/api_stub") else Path(__file__).resolve().parent / "stub"


def _load(kind: str, user_id: str):
    file = DATA_DIR / f"{kind}_{user_id}.json"
    if not file.exists():
        raise HTTPException(status_code=404, detail="user not found")
    return JSONResponse(content=json.loads(file.read_text()))


@app.get("/health")
def health(): return {"status": "ok"}

@app.get("/api/payments")
def get_payments(user_id: str):
    return _load("payments", user_id)

@app.get("/api/properties")
def get_properties(user_id: str):
    return _load("properties", user_id)
