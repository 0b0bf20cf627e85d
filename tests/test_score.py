from keysmith.errors import InvalidArgument
from keysmith.score import StrengthTier, tier_of


def test_identity_mapping():
    assert tier_of(0) is StrengthTier.VERY_WEAK
    assert tier_of(1) is StrengthTier.WEAK
    assert tier_of(2) is StrengthTier.MODERATE
    assert tier_of(3) is StrengthTier.STRONG
    assert tier_of(4) is StrengthTier.VERY_STRONG


def test_labels_and_colors():
    assert [t.label for t in StrengthTier] == ["Very Weak", "Weak", "Moderate", "Strong", "Very Strong"]
    assert [t.color for t in StrengthTier] == ["red", "red", "yellow", "green", "green"]


def test_progress():
    assert StrengthTier.VERY_WEAK.progress == 0.2
    assert StrengthTier.VERY_STRONG.progress == 1.0


def test_out_of_range_raises():
    for bad in (-1, 5, 100, 2.0, "3", None):
        try:
            tier_of(bad)
            raised = False
        except InvalidArgument:
            raised = True
        assert raised, bad
