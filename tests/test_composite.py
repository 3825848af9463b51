import pytest

from seal_schema import MISSING, ObjectSchema


@pytest.fixture()
def user_schema(seal):
    return seal.object({
        "id": seal.number.integer,
        "name": seal.string,
    })


# ---- object -----------------------------------------------------------------

def test_object_accepts_matching_mapping(seal, user_schema):
    assert seal.validate(user_schema, {"id": 1, "name": "Ada"}) == []


@pytest.mark.parametrize("value", [[1, 2], "x", 3, None, MISSING])
def test_object_rejects_non_mappings(seal, user_schema, value):
    assert seal.validate(user_schema, value) == ["not an object"]


def test_object_reports_first_missing_key(seal, user_schema):
    assert seal.validate(user_schema, {"id": 2}) == ['key "name" not found']
    assert seal.validate(user_schema, {}) == ['key "id" not found']


def test_object_prefixes_nested_errors(seal, user_schema):
    assert seal.validate(user_schema, {"id": 3.21, "name": "Ada"}) == ['key "id" shall be an integer']


def test_object_reports_only_first_failing_key(seal, user_schema):
    assert seal.validate(user_schema, {"id": 1.5, "name": 7}) == ['key "id" shall be an integer']


def test_object_missing_key_precedes_type_errors(seal, user_schema):
    assert seal.validate(user_schema, {"id": "one"}) == ['key "name" not found']


def test_object_rejects_unknown_keys(seal, user_schema):
    value = {"id": 1, "name": "Ada", "admin": True}
    assert seal.validate(user_schema, value) == ["unknown keys not allowed"]


def test_object_unknown_keys_checked_before_values(seal, user_schema):
    value = {"id": "bad", "name": "Ada", "admin": True}
    assert seal.validate(user_schema, value) == ["unknown keys not allowed"]


def test_loose_object_tolerates_unknown_keys(seal, user_schema):
    loose = user_schema.loose
    assert loose is not user_schema
    assert isinstance(loose, ObjectSchema)
    assert seal.validate(loose, {"id": 1, "name": "Ada", "admin": True}) == []
    assert seal.validate(loose, {"id": 1}) == ['key "name" not found']
    assert seal.validate(user_schema, {"id": 1, "name": "Ada", "admin": True}) == ["unknown keys not allowed"]


def test_optional_key_may_be_absent(seal):
    schema = seal.object({"id": seal.number, "nick": seal.string.optional})
    assert seal.validate(schema, {"id": 1}) == []
    assert seal.validate(schema, {"id": 1, "nick": ""}) == ['key "nick" empty strings are not allowed']


def test_nested_objects_chain_prefixes(seal):
    schema = seal.object({"owner": seal.object({"age": seal.number.gte(18)})})
    assert seal.validate(schema, {"owner": {"age": 12}}) == [
        'key "owner" key "age" shall be greater than or equal to 18'
    ]


def test_object_metadata(seal, user_schema):
    user_schema.name("User").external_docs({"description": "Docs", "url": "https://example.com"})
    descriptor = user_schema.export_metadata()
    assert descriptor["type"] == "object"
    assert descriptor["name"] == "User"
    assert descriptor["externalDocs"]["url"] == "https://example.com"
    assert descriptor["shape"]["id"]["type"] == "integer"
    assert descriptor["shape"]["name"]["type"] == "string"


def test_object_aliasing_is_visible(seal):
    name = seal.string
    schema = seal.object({"name": name})
    assert seal.validate(schema, {"name": "ab"}) == []

    name.min(3)
    assert seal.validate(schema, {"name": "ab"}) == ['key "name" should be longer than 2 symbols']
    assert schema.export_metadata()["shape"]["name"]["minLength"] == 3


# ---- array ------------------------------------------------------------------

def test_array_type_check(seal):
    schema = seal.array(seal.number)
    assert seal.validate(schema, "abc") == ["string is not an array"]
    assert seal.validate(schema, {"0": 1}) == ["object is not an array"]
    assert seal.validate(schema, (1, 2)) == []


def test_array_element_errors_are_unprefixed(seal):
    schema = seal.array(seal.number)
    assert seal.validate(schema, [1, "x", True]) == ["x is not a valid integer number"]


def test_array_uniqueness_and_min(seal):
    schema = seal.array(seal.number).min(2).unique()
    assert seal.validate(schema, [1, 1]) == ["duplicates not allowed"]
    assert seal.validate(schema, [1]) == ["shall contain at least 2 items"]
    assert seal.validate(schema, [1, 2]) == []


def test_array_unique_uses_identity_for_objects(seal):
    schema = seal.array(seal.object({"a": seal.number})).unique()
    first = {"a": 1}
    assert seal.validate(schema, [first, {"a": 1}]) == []
    assert seal.validate(schema, [first, first]) == ["duplicates not allowed"]


def test_array_max_and_length(seal):
    assert seal.validate(seal.array(seal.number).max(2), [1, 2, 3]) == ["shall contain less than 3 items"]
    assert seal.validate(seal.array(seal.number).length(2), [1]) == ["shall contain at least 2 items"]
    assert seal.validate(seal.array(seal.number).length(2), [1, 2]) == []


def test_array_whitelist_and_blacklist(seal):
    allowed = seal.array(seal.string).valid("a", "b")
    assert seal.validate(allowed, ["a", "b", "a"]) == []
    assert seal.validate(allowed, ["a", "c"]) == ["some of provided values are not allowed"]

    denied = seal.array(seal.string).invalid("root")
    assert seal.validate(denied, ["guest", "root"]) == ["some of provided values are not allowed"]
    assert seal.validate(denied, []) == []


def test_tuple_mode(seal):
    schema = seal.array([seal.string, seal.number])
    assert seal.validate(schema, ["a", 1]) == []
    assert seal.validate(schema, ["a"]) == ["invalid array length"]
    assert seal.validate(schema, ["a", 1, 2]) == ["invalid array length"]
    assert seal.validate(schema, [1, "a"]) == ["type number is not a string"]


def test_tuple_descriptor(seal):
    descriptor = seal.array([seal.string, seal.number.integer]).name("Pair").export_metadata()
    assert descriptor["type"] == "array"
    assert descriptor["name"] == "Pair"
    assert [d["type"] for d in descriptor["tuple"]] == ["string", "integer"]
    assert "items" not in descriptor


def test_array_items_descriptor_reflects_later_changes(seal):
    element = seal.number
    schema = seal.array(element)
    element.gte(1)
    assert schema.export_metadata()["items"]["minimum"] == 1
