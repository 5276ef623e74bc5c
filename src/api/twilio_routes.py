"""Twilio Voice SDK integration.

This module provides:
- Voice request URL (TwiML) for outgoing calls placed from the overlay.
- Token endpoint that issues the browser client its capability token.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from config.settings import Settings, get_settings
from integrations.errors import ProviderError
from integrations.twilio_client import (
    build_outgoing_call_twiml,
    build_voice_token,
    get_twilio_voice_config,
)

LOGGER = logging.getLogger(__name__)

router = APIRouter(tags=["twilio"])


class TokenResponse(BaseModel):
    token: str


def _twiml_response(xml: str) -> Response:
    return Response(content=xml, media_type="text/xml")


@router.post("/")
async def outgoing_call_instructions(settings: Settings = Depends(get_settings)) -> Response:
    """TwiML the Voice SDK fetches when the overlay starts an outgoing call."""

    xml = build_outgoing_call_twiml(
        caller_id=settings.twilio_caller_id,
        dial_number=settings.twilio_dial_number,
        record=settings.twilio_record_calls,
    )
    return _twiml_response(xml)


@router.post("/token", response_model=TokenResponse)
async def issue_voice_token(settings: Settings = Depends(get_settings)) -> TokenResponse:
    cfg = get_twilio_voice_config(settings)
    try:
        token = build_voice_token(cfg)
    except Exception as exc:
        LOGGER.exception("Twilio token generation failed: %s", exc)
        raise ProviderError(str(exc)) from exc
    return TokenResponse(token=token)
