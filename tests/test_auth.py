"""
Tests for session sign-in.
"""

from vacation_tracker.auth import Authenticator


class TestAuthenticator:
    """Tests for Authenticator."""

    def test_not_ready_before_sign_in(self):
        authenticator = Authenticator(token="abc")
        assert not authenticator.is_ready
        assert authenticator.session is None

    def test_token_maps_to_stable_user(self):
        first = Authenticator(token="abc").sign_in()
        second = Authenticator(token="abc").sign_in()
        other = Authenticator(token="xyz").sign_in()

        assert first.user_id == second.user_id
        assert first.user_id != other.user_id
        assert not first.is_anonymous

    def test_sign_in_is_idempotent(self):
        authenticator = Authenticator()
        assert authenticator.sign_in() is authenticator.sign_in()
        assert authenticator.is_ready

    def test_anonymous_without_identity_file(self):
        session = Authenticator().sign_in()
        assert session.is_anonymous
        assert session.user_id
        assert Authenticator().sign_in().user_id != session.user_id

    def test_anonymous_identity_is_kept(self, tmp_path):
        identity_path = tmp_path / "nested" / "identity"

        first = Authenticator(identity_path=str(identity_path)).sign_in()
        second = Authenticator(identity_path=str(identity_path)).sign_in()

        assert identity_path.read_text(encoding="utf-8") == first.user_id
        assert second.user_id == first.user_id

    def test_empty_identity_file_is_replaced(self, tmp_path):
        identity_path = tmp_path / "identity"
        identity_path.write_text("\n", encoding="utf-8")

        session = Authenticator(identity_path=str(identity_path)).sign_in()

        assert session.user_id
        assert identity_path.read_text(encoding="utf-8") == session.user_id

    def test_token_wins_over_identity_file(self, tmp_path):
        identity_path = tmp_path / "identity"
        identity_path.write_text("stored-id", encoding="utf-8")

        session = Authenticator(token="abc", identity_path=str(identity_path)).sign_in()

        assert session.user_id != "stored-id"
        assert not session.is_anonymous

    def test_sign_out(self):
        authenticator = Authenticator(token="abc")
        authenticator.sign_in()
        authenticator.sign_out()
        assert not authenticator.is_ready
