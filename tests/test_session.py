"""Tests for the DialogSession state machine."""

from constants import DIALOG_TITLE
from controller import DialogSession
from model import SessionState, UrlField


def enabled_flags(session):
    return [action.enabled for action in session.actions]


class TestSessionOpen:
    """Test what happens when the dialog opens."""

    def test_empty_upstream_starts_disabled(self, make_session):
        """Scenario: stored URL "" leaves every action disabled."""
        session = make_session("")
        assert enabled_flags(session) == [False, False, False]
        assert session.url is None

    def test_missing_upstream_starts_disabled(self, make_session):
        """A store without an upstream behaves like an empty one."""
        session = make_session(None)
        assert session.url_field.text == ""
        assert enabled_flags(session) == [False, False, False]

    def test_stored_url_starts_enabled(self, make_session):
        """Scenario: a stored URL enables every action."""
        session = make_session("https://example.com/repo")
        assert enabled_flags(session) == [True, True, True]
        assert session.url_field.text == "https://example.com/repo"

    def test_initial_state_is_open(self, make_session):
        assert make_session().state is SessionState.OPEN

    def test_configures_host(self, make_session, host):
        """Title is set and the window is not resizable."""
        make_session()
        assert host.title == DIALOG_TITLE
        assert host.resizable is False

    def test_requests_focus_on_url_field(self, make_session):
        session = make_session()
        assert session.get_preferred_focus() is session.url_field
        assert session.url_field.focus_requested is True

    def test_actions_updated_before_focus_request(self, host, factory):
        """Enablement runs before the URL field asks for focus."""
        seen = []

        class EmptyStore:
            def get_upstream(self):
                return None

        def recording_factory(context, url_field, container, on_success):
            actions = factory(context, url_field, container, on_success)
            for action in actions:
                action.add_listener(lambda action, enabled: seen.append(url_field.focus_requested))
            return actions

        DialogSession(host, EmptyStore(), recording_factory)
        assert seen == [False, False, False]

    def test_factory_receives_collaborators(self, make_session, factory, host):
        """The factory sees the context, the field, the host and the completion callback."""
        context = object()
        session = make_session("x", context=context)
        assert factory.context is context
        assert factory.url_field is session.url_field
        assert factory.container is host
        assert factory.on_success == session.complete

    def test_actions_keep_factory_order(self, make_session):
        session = make_session()
        assert [a.label for a in session.get_actions()] == [
            "Merge",
            "Overwrite Local",
            "Overwrite Remote",
        ]
        assert isinstance(session.get_actions(), tuple)

    def test_center_content_is_url_field(self, make_session):
        session = make_session()
        assert isinstance(session.get_center_content(), UrlField)


class TestSessionTextChange:
    """Test enablement tracking while the user types."""

    def test_typing_first_character_enables(self, make_session):
        """Scenario: going from "" to "h" enables the actions."""
        session = make_session("")
        session.url_field.set_text("h")
        assert enabled_flags(session) == [True, True, True]

    def test_enable_happens_exactly_when_non_blank(self, make_session):
        """Whitespace keeps actions disabled until a visible character arrives."""
        session = make_session("")
        history = []
        for text in [" ", "  ", "  h", "  ht"]:
            session.url_field.set_text(text)
            history.append(enabled_flags(session)[0])
        assert history == [False, False, True, True]

    def test_clearing_to_whitespace_disables(self, make_session):
        """Scenario: clearing a populated field to "   " disables the actions."""
        session = make_session("https://example.com/repo")
        session.url_field.set_text("   ")
        assert enabled_flags(session) == [False, False, False]
        assert session.url is None

    def test_url_keeps_raw_text(self, make_session):
        session = make_session()
        session.url_field.set_text(" https://example.com ")
        assert session.url == " https://example.com "

    def test_text_change_after_close_ignored(self, make_session):
        session = make_session("")
        session.cancel()
        session.url_field.set_text("https://example.com/repo")
        assert enabled_flags(session) == [False, False, False]


class TestSessionClose:
    """Test completion and cancellation."""

    def test_completion_accepts(self, make_session, host):
        """Scenario: a completion callback closes the session as accepted."""
        session = make_session("https://example.com/repo")
        session.complete()
        assert session.state is SessionState.ACCEPTED
        assert host.accept_count == 1

    def test_second_completion_is_noop(self, make_session, host):
        session = make_session("https://example.com/repo")
        session.complete()
        session.complete()
        assert session.state is SessionState.ACCEPTED
        assert host.accept_count == 1
        assert host.cancel_count == 0

    def test_cancel_closes(self, make_session, host):
        """Scenario: the user cancels before any sync completes."""
        session = make_session("https://example.com/repo")
        session.cancel()
        assert session.state is SessionState.CANCELLED
        assert host.cancel_count == 1

    def test_late_completion_after_cancel_ignored(self, make_session, host):
        session = make_session("https://example.com/repo")
        session.cancel()
        factory_callback = session.complete
        factory_callback()
        assert session.state is SessionState.CANCELLED
        assert host.accept_count == 0

    def test_cancel_after_accept_ignored(self, make_session, host):
        session = make_session("https://example.com/repo")
        session.complete()
        session.cancel()
        assert session.state is SessionState.ACCEPTED
        assert host.cancel_count == 0

    def test_action_success_closes_session(self, make_session, factory, host):
        """The callback handed to the factory is what closes the session."""
        session = make_session("https://example.com/repo")
        factory.on_success()
        assert session.state.is_closed
        assert host.accept_count == 1
