from integrity_rules.symboltable import Symbol, find_symbol


def test_find_existing():
    symbols = [Symbol("a", "1"), Symbol("b", "2")]
    assert find_symbol("b", symbols) is symbols[1]


def test_find_missing():
    assert find_symbol("z", [Symbol("a")]) is None
    assert find_symbol("a", []) is None


def test_first_of_duplicates_wins():
    symbols = [Symbol("g", ival=1), Symbol("g", ival=2)]
    assert find_symbol("g", symbols).ival == 1


def test_accepts_generator():
    found = find_symbol("y", (Symbol(n, n.upper()) for n in "xyz"))
    assert found.value == "Y"