"""
Generate requests — GenerateForm → typed generate request.

The CA the user picked decides the request kind:

  Local   → GenerateLocal  (codec-encoded extensions, general key types)
  Remote  → GenerateRemote (general key types)
  ACME:*  → GenerateACME   (at least one domain, ACME key types)
  other   → Result.failure(UNRECOGNIZED_CA)

Every stage returns Result, so the first rejected field short-circuits:

  classify(ca) → resolve key type → check kind-specific fields → build payload
"""

from __future__ import annotations

from datetime import UTC, datetime, time, timedelta

import structlog

from cert_codec import key_types
from cert_codec.classifiers.ca import (
    LOCAL_CA_NAME,
    AcmeCA,
    LocalCA,
    RemoteCA,
    UnrecognizedCA,
    classify,
    issuance_mode,
)
from cert_codec.classifiers.validity import as_utc
from cert_codec.codecs import basic_constraints, ext_key_usage, key_usage
from cert_codec.config import CodecSettings
from cert_codec.domain.extensions import BasicConstraintsSpec, ExtKeyUsageSpec, KeyUsageSpec
from cert_codec.domain.forms import GenerateForm
from cert_codec.domain.payloads import GenerateACME, GenerateLocal, GenerateRemote, GenerateRequest
from cert_codec.key_types import IssuanceMode, KeyType
from cert_codec.result import ErrorCode, FailureDescription, Result

log = structlog.get_logger()


def _extension_specs(
    form: GenerateForm,
) -> tuple[KeyUsageSpec, ExtKeyUsageSpec, BasicConstraintsSpec]:
    """Encode the enabled extensions; disabled ones go out as default specs (enabled=False)."""
    return (
        key_usage.encode(form.key_usage) if form.key_usage is not None else KeyUsageSpec(),
        ext_key_usage.encode(form.ext_key_usage) if form.ext_key_usage is not None else ExtKeyUsageSpec(),
        basic_constraints.encode(form.basic_constraints)
        if form.basic_constraints is not None
        else BasicConstraintsSpec(),
    )


def _validity_window(form: GenerateForm) -> Result[tuple[datetime, datetime]]:
    if form.valid_from is None or form.valid_to is None:
        return Result.failure(
            ErrorCode.VALIDATION_ERROR, "Local certificates need both valid_from and valid_to"
        )
    return Result.success((form.valid_from, form.valid_to)).ensure(
        lambda window: as_utc(window[0]) < as_utc(window[1]),
        ErrorCode.VALIDATION_ERROR,
        "valid_to must be later than valid_from",
    )


def _build_local(form: GenerateForm) -> Result[GenerateRequest]:
    def _assemble(key_type: KeyType, window: tuple[datetime, datetime]) -> GenerateRequest:
        ku_spec, eku_spec, bc_spec = _extension_specs(form)
        return GenerateLocal(
            name=form.name,
            ca=form.ca,
            dn=form.dn,
            key_type=key_type.identifier,
            issuer=form.issuer,
            valid_from=window[0],
            valid_to=window[1],
            key_usage=ku_spec,
            ext_key_usage=eku_spec,
            basic_constraints=bc_spec,
        )

    return key_types.resolve(form.key_type, IssuanceMode.GENERAL).flat_map(
        lambda key_type: _validity_window(form).map(lambda window: _assemble(key_type, window))
    )


def _build_remote(form: GenerateForm) -> Result[GenerateRequest]:
    return key_types.resolve(form.key_type, IssuanceMode.GENERAL).map(
        lambda key_type: GenerateRemote(
            name=form.name,
            ca=form.ca,
            dn=form.dn,
            key_type=key_type.identifier,
        )
    )


def _build_acme(form: GenerateForm) -> Result[GenerateRequest]:
    domains = [domain.strip() for domain in form.domains if domain.strip()]
    return (
        Result.success(domains)
        .ensure(bool, ErrorCode.VALIDATION_ERROR, "ACME requests need at least one domain")
        .flat_map(lambda _: key_types.resolve(form.key_type, IssuanceMode.ACME))
        .map(
            lambda key_type: GenerateACME(
                name=form.name,
                ca=form.ca,
                domains=domains,
                key_type=key_type.identifier,
            )
        )
    )


def build_generate_request(form: GenerateForm) -> Result[GenerateRequest]:
    """
    Turn a filled-in form into the request for the selected CA.

    Returns Result[GenerateLocal | GenerateRemote | GenerateACME] on success,
    or the failure of the first rejected field.
    """
    match classify(form.ca):
        case LocalCA():
            result = _build_local(form)
        case RemoteCA():
            result = _build_remote(form)
        case AcmeCA():
            result = _build_acme(form)
        case UnrecognizedCA(name):
            result = Result.failure(ErrorCode.UNRECOGNIZED_CA, f"Unrecognized CA: {name!r}")

    def _log_built(request: GenerateRequest) -> None:
        log.info("request.built", endpoint=request.ENDPOINT, name=request.name, ca=request.ca)

    def _log_rejected(err: FailureDescription) -> None:
        log.warning("request.rejected", ca=form.ca, code=err.code.value, message=err.message)

    return result.peek(_log_built).peek_failure(_log_rejected)


def default_form(settings: CodecSettings, now: datetime, ca: str = LOCAL_CA_NAME) -> GenerateForm:
    """
    A blank form for the given CA with the configured defaults.

    The key type comes from the catalog matching the CA; the validity window
    starts at UTC midnight of `now` and lasts settings.default_validity_days.
    """
    if now.tzinfo is not None:
        now = now.astimezone(UTC)
    valid_from = datetime.combine(now.date(), time.min, tzinfo=UTC)
    key_type = (
        settings.default_acme_key_type
        if issuance_mode(ca) is IssuanceMode.ACME
        else settings.default_key_type
    )
    return GenerateForm(
        name="",
        ca=ca,
        key_type=key_type,
        valid_from=valid_from,
        valid_to=valid_from + timedelta(days=settings.default_validity_days),
    )
