"""Score sharing and verification endpoints - reserved, not implemented"""

from fastapi import APIRouter, HTTPException

router = APIRouter()

NOT_IMPLEMENTED = "Score sharing and verification are not available yet"


@router.post("/scoring/scores/{score_id}/share", status_code=501)
def share_score(score_id: str):
    raise HTTPException(status_code=501, detail=NOT_IMPLEMENTED)


@router.post("/scoring/verifications/{score_id}", status_code=501)
def verify_score(score_id: str):
    raise HTTPException(status_code=501, detail=NOT_IMPLEMENTED)


@router.get("/scoring/verifications", status_code=501)
def get_verifications():
    raise HTTPException(status_code=501, detail=NOT_IMPLEMENTED)
