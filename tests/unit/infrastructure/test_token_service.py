"""
Testes unitários para InMemoryTokenService.
"""
import pytest

from src.domain.entities import User
from src.domain.exceptions import AuthenticationError
from src.infrastructure.security import InMemoryTokenService


class FakeClock:
    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def service(clock):
    return InMemoryTokenService(access_ttl_seconds=60, refresh_ttl_seconds=600, clock=clock)


@pytest.fixture
def user():
    return User(id="1", email="demo@clueso.io", first_name="Demo", last_name="User")


class TestInMemoryTokenService:

    def test_issue_and_authenticate(self, service, user):
        tokens = service.issue(user)

        assert tokens.access_token.startswith("mock-access-")
        assert tokens.refresh_token.startswith("mock-refresh-")
        assert tokens.expires_in == 60
        assert service.authenticate(tokens.access_token) is user

    def test_unknown_token(self, service):
        with pytest.raises(AuthenticationError, match="Invalid token"):
            service.authenticate("mock-access-nope")

    def test_access_token_expires(self, service, user, clock):
        tokens = service.issue(user)
        clock.now += 61
        with pytest.raises(AuthenticationError, match="Token expired"):
            service.authenticate(tokens.access_token)

    def test_refresh_rotates_pair(self, service, user, clock):
        old = service.issue(user)
        clock.now += 120

        refreshed_user, new = service.refresh(old.refresh_token)

        assert refreshed_user is user
        assert new.access_token != old.access_token
        assert service.authenticate(new.access_token) is user
        with pytest.raises(AuthenticationError):
            service.authenticate(old.access_token)
        with pytest.raises(AuthenticationError, match="Invalid refresh token"):
            service.refresh(old.refresh_token)

    def test_refresh_token_expires(self, service, user, clock):
        tokens = service.issue(user)
        clock.now += 601
        with pytest.raises(AuthenticationError, match="Refresh token expired"):
            service.refresh(tokens.refresh_token)

    def test_revoke(self, service, user):
        tokens = service.issue(user)

        assert service.revoke(tokens.access_token) is True
        assert service.revoke(tokens.access_token) is False
        with pytest.raises(AuthenticationError):
            service.authenticate(tokens.access_token)

    def test_token_pair_to_dict(self, service, user):
        tokens = service.issue(user)
        assert tokens.to_dict() == {
            "accessToken": tokens.access_token,
            "refreshToken": tokens.refresh_token,
            "expiresIn": 60
        }

    def test_expired_grants_are_purged_on_issue(self, service, user, clock):
        for _ in range(50):
            service.issue(user)
        assert service.active_grants == 50

        clock.now += 601
        fresh = service.issue(user)

        assert service.active_grants == 1
        assert service.authenticate(fresh.access_token) is user

    def test_grants_with_valid_refresh_token_are_kept(self, service, user, clock):
        old = service.issue(user)
        clock.now += 120
        service.issue(user)

        assert service.active_grants == 2
        refreshed_user, _ = service.refresh(old.refresh_token)
        assert refreshed_user is user
