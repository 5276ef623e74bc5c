from __future__ import annotations

from dataclasses import dataclass

from config.settings import Settings
from integrations.errors import ConfigurationError


@dataclass(frozen=True)
class TwilioVoiceConfig:
    account_sid: str
    auth_token: str
    application_sid: str
    token_ttl_seconds: int = 3600


def get_twilio_voice_config(settings: Settings) -> TwilioVoiceConfig:
    """Collect the credentials needed to sign a Voice client token.

    Raises ConfigurationError instead of letting Twilio sign a token with a blank secret.
    """

    account_sid = (settings.twilio_account_sid or "").strip()
    auth_token = (settings.twilio_auth_token or "").strip()
    application_sid = (settings.twilio_app_sid or "").strip()

    if not account_sid or not auth_token:
        raise ConfigurationError("TWILIO_ACCOUNT_SID and TWILIO_AUTH_TOKEN are required")
    if not application_sid:
        raise ConfigurationError("TWILIO_APP_SID is required")
    if not account_sid.startswith("AC"):
        raise ConfigurationError("TWILIO_ACCOUNT_SID must start with 'AC'")
    if not application_sid.startswith("AP"):
        raise ConfigurationError("TWILIO_APP_SID must start with 'AP'")

    return TwilioVoiceConfig(
        account_sid=account_sid,
        auth_token=auth_token,
        application_sid=application_sid,
        token_ttl_seconds=settings.twilio_token_ttl_seconds,
    )


def build_outgoing_call_twiml(*, caller_id: str, dial_number: str, record: bool) -> str:
    from twilio.twiml.voice_response import VoiceResponse

    response = VoiceResponse()
    dial = response.dial(caller_id=caller_id, record=record)
    dial.number(dial_number)
    return str(response)


def build_voice_token(cfg: TwilioVoiceConfig) -> str:
    from twilio.jwt.client import ClientCapabilityToken

    capability = ClientCapabilityToken(cfg.account_sid, cfg.auth_token, ttl=cfg.token_ttl_seconds)
    capability.allow_client_outgoing(cfg.application_sid)
    return capability.to_jwt()
