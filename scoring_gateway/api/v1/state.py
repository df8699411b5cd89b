"""Application state endpoints - read state, update scoring and open-banking config"""

import logging
from fastapi import APIRouter, Depends

from scoring_gateway.api.v1.schemas import AppStateResponse, OpenBankConfigSchema, ScoringConfigSchema
from scoring_gateway.api.dependencies import get_state_store
from scoring_gateway.state import StateStore

router = APIRouter()


@router.get("/state", response_model=AppStateResponse)
def get_state(store: StateStore = Depends(get_state_store)):
    return AppStateResponse.from_domain(store.snapshot())


@router.put("/scoring/config", response_model=AppStateResponse)
def set_scoring_config(
    config: ScoringConfigSchema,
    store: StateStore = Depends(get_state_store),
):
    """Select the scoring model used by subsequent score requests"""
    state = store.set_scoring_config(config.to_domain())
    logging.info("Scoring config updated", extra={"model": config.model})
    return AppStateResponse.from_domain(state)


@router.put("/openbank/config", response_model=AppStateResponse)
def set_openbank_config(
    config: OpenBankConfigSchema,
    store: StateStore = Depends(get_state_store),
):
    """Override open-banking client settings; omitted fields fall back to service settings"""
    state = store.set_openbank_config(config.to_domain())
    logging.info("Open-banking config updated", extra={"base_url": config.base_url})
    return AppStateResponse.from_domain(state)
