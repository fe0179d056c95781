"""Tests for wager configuration.

Critical scenarios tested:
- First configuration sets wager and pot and emits WagerConfigured
- Later configurations are silent no-ops
- Unsigned origins are rejected without state change
- Zero wager is allowed
"""

from coinflip.schemas.game_engine import GameState
from coinflip.services.game import GameModule, InMemoryNotificationSink
from coinflip.services.game.engine import (
    ConfigureWagerAction,
    WagerConfigured,
    process_action,
)

from .conftest import PARTICIPANT_1_ID, PARTICIPANT_2_ID, create_host


class TestFirstConfiguration:
    """Configuring an unconfigured game."""

    def test_sets_wager_and_pot(self, module: GameModule):
        result = module.configure_wager(PARTICIPANT_1_ID, 100)

        assert result.success
        assert module.get_wager() == 100
        assert module.get_pot() == 100
        assert module.get_nonce() == 0

    def test_emits_wager_configured(self, module: GameModule, sink: InMemoryNotificationSink):
        result = module.configure_wager(PARTICIPANT_1_ID, 100)

        assert len(result.events) == 1
        event = result.events[0]
        assert isinstance(event, WagerConfigured)
        assert event.amount == 100
        assert sink.events == [event]

    def test_zero_wager_allowed(self, module: GameModule):
        result = module.configure_wager(PARTICIPANT_1_ID, 0)

        assert result.success
        assert module.get_wager() == 0
        assert module.get_pot() == 0

    def test_any_signed_origin_may_configure(self, module: GameModule):
        result = module.configure_wager(PARTICIPANT_2_ID, 25)

        assert result.success
        assert module.get_wager() == 25


class TestReconfiguration:
    """Configuring an already configured game."""

    def test_second_call_keeps_first_amount(self, module: GameModule):
        module.configure_wager(PARTICIPANT_1_ID, 50)
        result = module.configure_wager(PARTICIPANT_1_ID, 999)

        assert result.success
        assert module.get_wager() == 50
        assert module.get_pot() == 50

    def test_noop_emits_no_notification(self, module: GameModule, sink: InMemoryNotificationSink):
        """The no-op path stays silent, unlike the first configuration."""
        module.configure_wager(PARTICIPANT_1_ID, 50)
        result = module.configure_wager(PARTICIPANT_2_ID, 999)

        assert result.success
        assert result.events == []
        assert len(sink.events) == 1

    def test_reconfigure_after_play_keeps_pot(self, configured_module: GameModule):
        configured_module.play(PARTICIPANT_1_ID)  # loses, pot 200
        configured_module.configure_wager(PARTICIPANT_1_ID, 5)

        assert configured_module.get_wager() == 100
        assert configured_module.get_pot() == 200
        assert configured_module.get_nonce() == 1


class TestConfigurationRejected:
    """Unsigned configuration requests."""

    def test_unsigned_origin_rejected(self, module: GameModule, sink: InMemoryNotificationSink):
        result = module.configure_wager(None, 100)

        assert not result.success
        assert result.error_code == "AUTH_ERROR"
        assert result.state is None
        assert module.get_state() == GameState()
        assert sink.events == []

    def test_engine_does_not_modify_input_state(self):
        state = GameState()
        result = process_action(state, ConfigureWagerAction(amount=10), PARTICIPANT_1_ID, create_host())

        assert result.success
        assert state == GameState()
        assert result.state == GameState(wager=10, pot=10, nonce=0)
