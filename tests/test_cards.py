import pytest

from poker_cards import Card, InvalidCardSeedError, cards_to_labels, parse_cards, parse_label
from poker_cards.cards import ACE, FIVE, KING, NUM_CARDS, TWO


def test_from_seed_maps_face_and_suit():
    for seed in range(NUM_CARDS):
        card = Card.from_seed(seed)
        assert card.face == seed % 13
        assert card.suit == seed // 13
        assert card.seed == seed


def test_all_seeds_yield_distinct_cards():
    cards = {Card.from_seed(seed) for seed in range(NUM_CARDS)}
    assert len(cards) == NUM_CARDS
    assert len({(card.face, card.suit) for card in cards}) == NUM_CARDS


def test_face_index_constants_match_seed_layout():
    assert Card.from_seed(0).face == TWO
    assert Card.from_seed(3).face == FIVE
    assert Card.from_seed(11).face == KING
    assert Card.from_seed(12).face == ACE


def test_labels():
    ace_of_hearts = Card.from_seed(12)
    assert ace_of_hearts.short_label == "AH"
    assert ace_of_hearts.label == "Ace_of_Hearts"
    assert str(ace_of_hearts) == "Ace_of_Hearts"

    two_of_clubs = Card.from_seed(39)
    assert two_of_clubs.short_label == "2C"
    assert two_of_clubs.label == "Two_of_Clubs"

    ten_of_spades = Card(8, 1)
    assert ten_of_spades.short_label == "TS"
    assert ten_of_spades.label == "Ten_of_Spades"
    assert Card(10, 2).label == "Queen_of_Diamonds"


def test_cards_are_immutable_values():
    card = Card.from_seed(25)
    assert card == Card(12, 1)
    assert hash(card) == hash(Card(12, 1))
    with pytest.raises(AttributeError):
        card.face = 0  # type: ignore[misc]


def test_from_seed_rejects_out_of_range():
    with pytest.raises(InvalidCardSeedError, match="Invalid card seed"):
        Card.from_seed(52)
    with pytest.raises(InvalidCardSeedError, match="Invalid card seed"):
        Card.from_seed(-1)
    with pytest.raises(ValueError):
        Card.from_seed(True)  # type: ignore[arg-type]


def test_card_validation_rejects_invalid_fields():
    with pytest.raises(ValueError, match="Invalid face"):
        Card(13, 0)
    with pytest.raises(ValueError, match="Invalid suit"):
        Card(0, 4)


def test_parse_label_round_trips_every_card():
    for seed in range(NUM_CARDS):
        card = Card.from_seed(seed)
        assert parse_label(card.short_label) == card


def test_parse_label_is_case_insensitive_and_strict():
    assert parse_label("kd") == Card(KING, 2)
    with pytest.raises(ValueError, match="Invalid card label"):
        parse_label("10H")
    with pytest.raises(ValueError, match="Invalid card label"):
        parse_label("1H")
    with pytest.raises(ValueError, match="Invalid card label"):
        parse_label("AX")


def test_cards_to_labels():
    labels = ["AH", "KS", "7D", "2C"]
    assert cards_to_labels(parse_cards(labels)) == labels
