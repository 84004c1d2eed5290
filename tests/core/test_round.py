"""Tests for the round controller."""

import pytest

from twentyone.cards import Card
from twentyone.game import EventType, Round, RoundOutcome, TurnState, resolve_round


@pytest.fixture
def play(make_player, dealer, stacked_deck, rules, events):
    """Play one round from a stacked deck with scripted player answers."""

    def _play(script, *answers):
        player = make_player(*answers)
        deck = stacked_deck(script)
        result = Round(player, dealer, deck, rules, events).play()
        return result, player, deck

    return _play


class TestRound:
    """Tests for playing a single round."""

    def test_scripted_round_end_to_end(self, play, dealer, events, dealer_wins_script):
        """Test 4♦ 3♦ + King♣ (17) loses to the dealer's 9♣ 7♠ + 2♥ (18)."""
        result, player, deck = play(dealer_wins_script, "h", "s")

        assert [str(c) for c in player.hand] == ["4♦", "3♦", "King♣"]
        assert [str(c) for c in dealer.hand] == ["9♣", "7♠", "2♥"]
        assert result.player_total == 17
        assert result.dealer_total == 18
        assert result.outcome == RoundOutcome.DEALER_WINS
        assert result.winner == "Alice"
        assert dealer.score == 1
        assert player.score == 0
        assert len(deck) == 0

    def test_initial_deal_hides_dealer_hole_card(self, play, events, dealer_wins_script):
        """Test the opening display shows only the dealer's first card."""
        play(dealer_wins_script, "h", "s")

        deal = events.of_type(EventType.INITIAL_DEAL)[0].data
        assert deal["dealer_up_card"] == "9♣"
        assert deal["dealer_hidden"] == 1
        assert "7♠" not in str(deal)
        assert deal["player_cards"] == ["4♦", "3♦"]
        assert deal["player_total"] == 7

    def test_player_wins(self, play, player_wins_script):
        """Test a higher player total wins the point."""
        result, player, _ = play(player_wins_script, "s")

        assert result.outcome == RoundOutcome.PLAYER_WINS
        assert result.winner == "Bob"
        assert player.score == 1

    def test_tie_changes_no_score(self, play, dealer, tie_script):
        """Test equal totals are a tie with no point awarded."""
        result, player, _ = play(tie_script, "s")

        assert result.outcome == RoundOutcome.TIE
        assert result.winner is None
        assert player.score == 0
        assert dealer.score == 0

    def test_player_bust_skips_dealer_turn(self, play, dealer, events, player_busts_script):
        """Test the dealer draws nothing once the player has bust."""
        result, player, deck = play(player_busts_script, "h")

        assert result.outcome == RoundOutcome.DEALER_WINS
        assert result.player_bust
        assert not result.dealer_played
        assert len(dealer.hand) == 2
        assert dealer.total == 11
        assert dealer.turn_state == TurnState.AWAITING_DECISION
        assert len(events.of_type(EventType.DEALER_TURN_SKIPPED)) == 1

    def test_dealer_bust_player_wins(self, play, dealer, dealer_busts_script):
        """Test a dealer bust gives the player the point."""
        result, player, _ = play(dealer_busts_script, "s")

        assert result.outcome == RoundOutcome.PLAYER_WINS
        assert result.dealer_bust
        assert dealer.is_bust
        assert player.score == 1

    def test_round_resets_deck_and_hands(self, make_player, dealer, stacked_deck, rules, events, tie_script):
        """Test a new round starts from a rebuilt deck and empty hands."""
        player = make_player("s", "s")
        deck = stacked_deck(tie_script)

        Round(player, dealer, deck, rules, events).play()
        Round(player, dealer, deck, rules, events, number=2).play()

        assert deck.resets == 3  # construction plus one per round
        assert len(player.hand) == 2
        assert len(dealer.hand) == 2
        started = events.of_type(EventType.ROUND_STARTED)
        assert [e.data["number"] for e in started] == [1, 2]

    def test_round_events_in_order(self, play, events, player_wins_script):
        """Test the round announces its phases in order."""
        play(player_wins_script, "s")

        flow = [
            e.event_type
            for e in events.history
            if e.event_type
            in (
                EventType.ROUND_STARTED,
                EventType.INITIAL_DEAL,
                EventType.PARTICIPANT_STAYED,
                EventType.HANDS_REVEALED,
                EventType.ROUND_ENDED,
                EventType.SCORES_UPDATED,
            )
        ]
        assert flow == [
            EventType.ROUND_STARTED,
            EventType.INITIAL_DEAL,
            EventType.PARTICIPANT_STAYED,  # player
            EventType.PARTICIPANT_STAYED,  # dealer
            EventType.HANDS_REVEALED,
            EventType.ROUND_ENDED,
            EventType.SCORES_UPDATED,
        ]


class TestResolveRound:
    """Tests for round resolution."""

    @pytest.mark.parametrize(
        "player_cards,dealer_cards,expected",
        [
            (("10S", "9H"), ("10C", "9D"), RoundOutcome.TIE),
            (("10S", "9H"), ("10C", "7D"), RoundOutcome.PLAYER_WINS),
            (("10S", "6H", "KC"), ("10C", "6D", "KD"), RoundOutcome.DEALER_WINS),
            (("10S", "2H"), ("10C", "6D", "KD"), RoundOutcome.PLAYER_WINS),
        ],
    )
    def test_outcomes(self, make_player, dealer, player_cards, dealer_cards, expected):
        """Test player bust is checked first, then dealer bust, then totals."""
        player = make_player()
        for card in player_cards:
            player.receive(Card.from_string(card))
        for card in dealer_cards:
            dealer.receive(Card.from_string(card))

        assert resolve_round(player, dealer) == expected
