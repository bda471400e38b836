from __future__ import annotations

import pytest

from typegen_naming import NameAllocator, split_words, to_type_name


@pytest.mark.parametrize(
    ("segment", "expected"),
    [
        ("user", "User"),
        ("user_profile", "UserProfile"),
        ("user-profile", "UserProfile"),
        ("userProfile", "UserProfile"),
        ("HTMLParser", "HTMLParser"),
        ("ID", "ID"),
        ("2fa", "T2Fa"),
        ("", "Type"),
        ("$$$", "Type"),
    ],
)
def test_to_type_name(segment: str, expected: str) -> None:
    assert to_type_name(segment) == expected


def test_split_words() -> None:
    assert split_words("isStudent") == ["is", "Student"]
    assert split_words("first-name_2") == ["first", "name", "2"]


def test_same_path_yields_same_name() -> None:
    allocator = NameAllocator()

    first = allocator.allocate(["users", "address"])
    second = allocator.allocate(("users", "address"))

    assert first == second == "Address"


def test_collisions_get_numeric_suffix() -> None:
    allocator = NameAllocator()

    assert allocator.allocate(["billing", "address"]) == "Address"
    assert allocator.allocate(["shipping", "address"]) == "Address2"
    assert allocator.allocate(["contact", "address"]) == "Address3"
    assert allocator.allocate(["shipping", "address"]) == "Address2"


def test_root_path_uses_root_name_verbatim() -> None:
    allocator = NameAllocator("my root")

    assert allocator.allocate([]) == "my root"
    assert allocator.is_taken("my root")


def test_reserved_names_are_avoided() -> None:
    allocator = NameAllocator()

    assert allocator.allocate(["string"]) == "String2"
    assert allocator.allocate(["self"]) == "Self2"
    assert allocator.allocate(["data"]) == "Data2"


def test_reserve_is_not_tied_to_a_path() -> None:
    allocator = NameAllocator()
    allocator.allocate(["data_list"])

    assert allocator.reserve("DataList") == "DataList2"
