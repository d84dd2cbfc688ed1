from statecheck.vec import Len, LenOk, Pop, PopOk, Push, PushOk, VecSpec


def test_models_expected_semantics():
    v = VecSpec(["A"])
    assert v.invoke(Len()) == LenOk(1)
    assert v.invoke(Push("B")) == PushOk()
    assert v.invoke(Len()) == LenOk(2)
    assert v.invoke(Pop()) == PopOk("B")
    assert v.invoke(Len()) == LenOk(1)
    assert v.invoke(Pop()) == PopOk("A")
    assert v.invoke(Len()) == LenOk(0)
    assert v.invoke(Pop()) == PopOk(None)
    assert v.invoke(Len()) == LenOk(0)


def test_accepts_valid_histories():
    assert VecSpec().is_valid_history([])
    assert VecSpec().is_valid_history([
        (Push(10), PushOk()),
        (Push(20), PushOk()),
        (Len(), LenOk(2)),
        (Pop(), PopOk(20)),
        (Len(), LenOk(1)),
        (Pop(), PopOk(10)),
        (Len(), LenOk(0)),
        (Pop(), PopOk(None)),
    ])


def test_rejects_invalid_histories():
    assert not VecSpec().is_valid_history([
        (Push(10), PushOk()),
        (Push(20), PushOk()),
        (Len(), LenOk(1)),
        (Push(30), PushOk()),
    ])
    assert not VecSpec().is_valid_history([
        (Push(10), PushOk()),
        (Push(20), PushOk()),
        (Pop(), PopOk(10)),
    ])


def test_len_reflects_items():
    v = VecSpec()
    v.invoke(Push(1))
    v.invoke(Push(2))
    assert len(v) == 2
    v.invoke(Pop())
    assert len(v) == 1


def test_mismatched_return_kind_is_invalid():
    v = VecSpec([1])
    assert v.is_valid_step(Push(2), PopOk(2)) is False
    assert v.is_valid_step(Len(), PushOk()) is False
    assert v.items == [1]


def test_default_instances_are_independent():
    a = VecSpec()
    b = VecSpec()
    a.invoke(Push("x"))
    assert b.items == []
    assert a == VecSpec(["x"])


def test_pop_on_empty_returns_none():
    assert VecSpec().invoke(Pop()) == PopOk()