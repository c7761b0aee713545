from __future__ import annotations

import pytest

from sea_transport.auth.jwt import JwtConfig, JwtValidationError, decode_and_validate, issue_token
from sea_transport.auth.models import ROLE_ADMIN, ROLE_USER, Principal
from sea_transport.settings import Settings


def test_issue_and_decode(settings: Settings) -> None:
    cfg = JwtConfig.from_settings(settings)
    token = issue_token(cfg=cfg, subject="captain", roles=(ROLE_USER,))

    claims = decode_and_validate(cfg=cfg, token=token)

    assert claims["sub"] == "captain"
    assert claims["roles"] == [ROLE_USER]
    assert claims["iss"] == settings.jwt_issuer


def test_decode_rejects_wrong_audience(settings: Settings) -> None:
    cfg = JwtConfig.from_settings(settings)
    token = issue_token(cfg=cfg, subject="user", roles=[])
    other = JwtConfig(alg=cfg.alg, issuer=cfg.issuer, audience="another-api", secret=cfg.secret)

    with pytest.raises(JwtValidationError):
        decode_and_validate(cfg=other, token=token)


def test_principal_roles() -> None:
    user = Principal(subject="u", roles=frozenset({ROLE_USER}))
    admin = Principal(subject="a", roles=frozenset({ROLE_ADMIN}))
    nobody = Principal(subject="n", roles=frozenset())

    assert user.has_any_role(ROLE_USER)
    assert not user.is_admin
    assert admin.has_any_role(ROLE_USER)
    assert not nobody.has_any_role(ROLE_USER)
