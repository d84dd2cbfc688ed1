from statecheck.register import Read, ReadOk, Register, Write, WriteOk


def test_models_expected_semantics():
    r = Register("A")
    assert r.invoke(Read()) == ReadOk("A")
    assert r.invoke(Write("B")) == WriteOk()
    assert r.invoke(Read()) == ReadOk("B")


def test_accepts_valid_histories():
    assert Register("A").is_valid_history([])
    assert Register("A").is_valid_history([
        (Read(), ReadOk("A")),
        (Write("B"), WriteOk()),
        (Read(), ReadOk("B")),
        (Write("C"), WriteOk()),
        (Read(), ReadOk("C")),
    ])


def test_rejects_invalid_histories():
    assert not Register("A").is_valid_history([
        (Read(), ReadOk("B")),
        (Write("B"), WriteOk()),
    ])
    assert not Register("A").is_valid_history([
        (Write("B"), WriteOk()),
        (Read(), ReadOk("A")),
    ])


def test_mismatched_return_kind_is_invalid():
    r = Register("A")
    assert r.is_valid_step(Write("B"), ReadOk("B")) is False
    assert r.is_valid_step(Read(), WriteOk()) is False
    assert r.value == "A"


def test_valid_write_step_updates_value():
    r = Register("A")
    assert r.is_valid_step(Write("Z"), WriteOk()) is True
    assert r == Register("Z")


def test_reprs_match_debug_format():
    assert repr(Write("B")) == "Write('B')"
    assert repr(Read()) == "Read"
    assert repr(WriteOk()) == "WriteOk"
    assert repr(ReadOk("A")) == "ReadOk('A')"


def test_ops_are_hashable_and_comparable():
    assert {Write("B"), Write("B"), Read()} == {Write("B"), Read()}
    assert Write("B") != Write("C")
    assert ReadOk("A") != WriteOk()