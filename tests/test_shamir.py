import itertools

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from sss import InvalidArgument, SecretShare
from sss.numbers import first_prime_greater_than
from sss.policy import SharingPolicy
from sss.shamir import join, join_to_string, split, split_secret, split_string

TEST_SECRET = 1234
TEST_PRIME = 1613
TEST_COEFFICIENTS = [TEST_SECRET, 166, 94]


@pytest.fixture
def reference_shares():
    return split(TEST_SECRET, TEST_COEFFICIENTS, 6, 3, TEST_PRIME)


def test_split_reference_values(reference_shares):
    assert [s.value for s in reference_shares] == [1494, 329, 965, 176, 1188, 775]
    assert [s.index for s in reference_shares] == [1, 2, 3, 4, 5, 6]
    assert {s.prime for s in reference_shares} == {TEST_PRIME}


def test_join_sufficient_shares(reference_shares):
    subset = [reference_shares[3], reference_shares[5], reference_shares[1]]
    assert join(subset) == TEST_SECRET


def test_join_insufficient_shares(reference_shares):
    subset = [reference_shares[0], reference_shares[5]]
    assert join(subset) != TEST_SECRET


def test_join_every_threshold_subset(reference_shares):
    for subset in itertools.combinations(reference_shares, 3):
        assert join(subset) == TEST_SECRET
    assert join(reference_shares) == TEST_SECRET


def test_join_accepts_any_order(reference_shares):
    assert join(reversed(reference_shares[:4])) == TEST_SECRET


def test_shares_are_immutable_values(reference_shares):
    share = reference_shares[0]
    assert share == SecretShare(1, 1494, TEST_PRIME)
    assert len({share, SecretShare(1, 1494, TEST_PRIME)}) == 1
    assert sorted(reversed(reference_shares)) == reference_shares
    with pytest.raises(AttributeError):
        share.value = 0


def test_split_is_deterministic():
    first = split(TEST_SECRET, TEST_COEFFICIENTS, 6, 3, TEST_PRIME)
    second = split(TEST_SECRET, list(TEST_COEFFICIENTS), 6, 3, TEST_PRIME)
    assert first == second


def test_split_ignores_extra_coefficients(reference_shares):
    shares = split(TEST_SECRET, TEST_COEFFICIENTS + [999, 5], 6, 3, TEST_PRIME)
    assert shares == reference_shares


def test_threshold_one_gives_secret_everywhere():
    shares = split(TEST_SECRET, [TEST_SECRET], 4, 1, TEST_PRIME)
    assert all(s.value == TEST_SECRET for s in shares)
    assert join(shares[2:3]) == TEST_SECRET


@pytest.mark.parametrize(
    "secret, coefficients, total, threshold, prime, message",
    [
        (0, [0, 1, 2], 6, 3, TEST_PRIME, "positive"),
        (-5, [-5, 1, 2], 6, 3, TEST_PRIME, "positive"),
        (TEST_SECRET, TEST_COEFFICIENTS, 6, 3, TEST_SECRET, "greater than secret"),
        (TEST_SECRET, TEST_COEFFICIENTS, 6, 3, 1000, "greater than secret"),
        (TEST_SECRET, TEST_COEFFICIENTS[:2], 6, 3, TEST_PRIME, "need 3, have 2"),
        (TEST_SECRET, TEST_COEFFICIENTS, 2, 3, TEST_PRIME, "greater than or equal"),
        (TEST_SECRET, TEST_COEFFICIENTS, 6, 0, TEST_PRIME, "at least 1"),
        (TEST_SECRET, TEST_COEFFICIENTS, 256, 3, TEST_PRIME, "exceed"),
    ],
)
def test_split_rejects_invalid_arguments(secret, coefficients, total, threshold, prime, message):
    with pytest.raises(InvalidArgument) as exc:
        split(secret, coefficients, total, threshold, prime)
    assert message in str(exc.value)


def test_join_rejects_mixed_series(reference_shares):
    other = split(TEST_SECRET, TEST_COEFFICIENTS, 6, 3, 1619)
    with pytest.raises(InvalidArgument) as exc:
        join([reference_shares[0], reference_shares[1], other[2]])
    assert "same series" in str(exc.value)


def test_join_rejects_duplicate_index(reference_shares):
    with pytest.raises(InvalidArgument):
        join([reference_shares[0], reference_shares[0], reference_shares[2]])


def test_join_rejects_empty_input():
    with pytest.raises(InvalidArgument):
        join([])


def test_join_rejects_indices_congruent_modulo_prime():
    with pytest.raises(InvalidArgument) as exc:
        join([SecretShare(1, 5, 7), SecretShare(8, 6, 7)])
    assert "not distinct modulo the prime" in str(exc.value)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        join([SecretShare(1, 5, 7), SecretShare(1, 6, 7)])


def test_split_secret_roundtrip():
    secret = 424242
    shares = split_secret(secret, 6, 4)
    assert len(shares) == 6
    assert len({s.index for s in shares}) == 6
    assert all(s.prime > secret for s in shares)
    assert join(shares[:4]) == secret
    assert join(shares) == secret


def test_split_secret_random_prime():
    secret = 2**200 + 12345
    shares = split_secret(secret, 5, 3, random_prime=True)
    prime = shares[0].prime
    assert prime > secret
    assert prime.bit_length() == secret.bit_length()
    assert join(shares[2:]) == secret


@pytest.mark.parametrize("secret", [1, 7, 127, 255, 2**61 - 1])
def test_split_secret_random_prime_without_room_in_bit_length(secret):
    shares = split_secret(secret, 3, 2, random_prime=True)
    assert shares[0].prime > max(secret, 3)
    for subset in itertools.combinations(shares, 2):
        assert join(subset) == secret


def test_split_secret_small_secret_keeps_indices_distinct():
    shares = split_secret(1, 5, 3)
    assert shares[0].prime > 5
    for subset in itertools.combinations(shares, 3):
        assert join(subset) == 1


def test_split_secret_follows_policy(monkeypatch):
    import sss.shamir as shamir_module

    monkeypatch.setattr(shamir_module, "policy", SharingPolicy(prime_strategy="random"))
    secret = 2**64 + 1
    shares = shamir_module.split_secret(secret, 3, 2)
    assert shares[0].prime.bit_length() == secret.bit_length()


def test_split_string_roundtrip():
    shares = split_string("Hello World!", 5, 3)
    assert join_to_string(shares[1:4]) == "Hello World!"


def test_split_string_unicode():
    secret = "Тајна лозинка ✓ 🎉"
    shares = split_string(secret, 4, 2, random_prime=True)
    assert join_to_string([shares[3], shares[0]]) == secret


def test_split_string_rejects_empty():
    with pytest.raises(InvalidArgument):
        split_string("", 3, 2)


def test_edge_cases():
    one_share = split_secret(77, 1, 1)
    assert join(one_share) == 77

    all_required = split_secret(88, 4, 4)
    assert join(all_required) == 88


@st.composite
def _split_cases(draw):
    secret = draw(st.integers(min_value=1, max_value=2**256))
    threshold = draw(st.integers(min_value=1, max_value=6))
    total = draw(st.integers(min_value=threshold, max_value=10))
    prime = first_prime_greater_than(max(secret, total))
    tail = draw(
        st.lists(
            st.integers(min_value=0, max_value=prime - 1),
            min_size=threshold - 1,
            max_size=threshold - 1,
        )
    )
    picked = draw(st.permutations(range(total)))[:threshold]
    return secret, [secret] + tail, total, threshold, prime, picked


@settings(max_examples=60, deadline=None)
@given(_split_cases())
def test_any_threshold_subset_recovers_secret(case):
    secret, coefficients, total, threshold, prime, picked = case
    shares = split(secret, coefficients, total, threshold, prime)
    assert len(shares) == total
    assert join([shares[i] for i in picked]) == secret
