from algokit.succession import Monarchy


def _family():
    monarchy = Monarchy("jake")
    monarchy.birth("charlie", "jake")
    monarchy.birth("lucy", "jake")
    monarchy.birth("mark", "charlie")
    monarchy.birth("sophie", "charlie")
    monarchy.birth("james", "lucy")
    monarchy.birth("lily", "lucy")
    return monarchy


def test_succession_after_death():
    monarchy = _family()
    monarchy.death("charlie")
    assert monarchy.succession() == ["jake", "mark", "sophie", "lucy", "james", "lily"]


def test_succession_everyone_alive():
    assert _family().succession() == [
        "jake",
        "charlie",
        "mark",
        "sophie",
        "lucy",
        "james",
        "lily",
    ]


def test_king_alone():
    assert Monarchy("jake").succession() == ["jake"]


def test_dead_king_keeps_descendants():
    monarchy = _family()
    monarchy.death("jake")
    result = monarchy.succession()
    assert "jake" not in result
    assert result[0] == "charlie"


def test_birth_with_unknown_parent_is_ignored():
    monarchy = _family()
    before = monarchy.succession()
    monarchy.birth("nobody", "stranger")
    assert monarchy.succession() == before


def test_death_of_unknown_is_ignored():
    monarchy = _family()
    before = monarchy.succession()
    monarchy.death("stranger")
    assert monarchy.succession() == before


def test_grandchild_of_dead_parent_still_in_line():
    monarchy = _family()
    monarchy.death("charlie")
    monarchy.birth("ella", "charlie")
    result = monarchy.succession()
    assert result.index("ella") == result.index("sophie") + 1
    assert result.index("ella") < result.index("lucy")