from peernet.dictionary import Dictionary, Entry, compare_string_keys


def test_compare_string_keys_ignores_values():
    assert compare_string_keys(Entry("a", 2), Entry("b", 1)) == -1
    assert compare_string_keys(Entry("b", 1), Entry("a", 2)) == 1
    assert compare_string_keys(Entry("k", 1), Entry("k", 2)) == 0


def test_insert_and_search():
    routes = Dictionary()
    routes.insert("/known_hosts\n", "hosts handler")
    routes.insert("/status", "status handler")
    assert routes.search("/known_hosts\n") == "hosts handler"
    assert routes.search("/status") == "status handler"


def test_missing_key_is_none():
    table = Dictionary()
    table.insert("present", 1)
    assert table.search("absent") is None


def test_search_empty_dictionary():
    assert Dictionary().search("key") is None


def test_keys_in_insertion_order():
    table = Dictionary()
    names = ["delta", "alpha", "charlie"]
    for name in names:
        table.insert(name, name.upper())
    assert list(table.keys) == names
    assert [table.search(name) for name in names] == [name.upper() for name in names]


def test_duplicate_key_keeps_first_value_but_records_key():
    table = Dictionary()
    table.insert("host", "first")
    table.insert("host", "second")
    assert table.search("host") == "first"
    assert list(table.keys) == ["host", "host"]


def test_custom_compare_for_integer_keys():
    table = Dictionary(lambda a, b: (a.key > b.key) - (a.key < b.key))
    for number in [7, 3, 9, 1]:
        table.insert(number, str(number))
    assert table.search(9) == "9"
    assert table.search(1) == "1"
    assert table.search(4) is None