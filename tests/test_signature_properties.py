"""Property-based tests for the signature engine."""

from hypothesis import assume, given
from hypothesis import strategies as st

from laneful.webhooks.signature import generate_signature, verify_signature

secrets_ = st.text(min_size=1).filter(lambda s: s.strip())
payloads = st.binary(max_size=2048)


@given(secret=secrets_, payload=payloads)
def test_generated_signature_always_verifies(secret, payload):
    sig = generate_signature(secret, payload)
    assert verify_signature(secret, payload, sig) is True
    assert verify_signature(secret, payload, "sha256=" + sig) is True


@given(secret1=secrets_, secret2=secrets_, payload=payloads)
def test_different_secrets_give_different_signatures(secret1, secret2, payload):
    # HMAC zero-pads short keys, so trailing NULs do not change the key
    assume(secret1.rstrip("\x00") != secret2.rstrip("\x00"))
    assert generate_signature(secret1, payload) != generate_signature(secret2, payload)


@given(secret=secrets_, payload=payloads, candidate=st.text())
def test_verify_never_raises(secret, payload, candidate):
    result = verify_signature(secret, payload, candidate)
    assert isinstance(result, bool)


@given(secret=secrets_, payload=payloads)
def test_signature_is_lowercase_hex(secret, payload):
    sig = generate_signature(secret, payload)
    assert len(sig) == 64
    assert all(c in "0123456789abcdef" for c in sig)
