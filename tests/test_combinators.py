from seal_schema import NotSchema, OneOfSchema


def test_one_of_reports_every_branch(seal):
    schema = seal.one_of(seal.string, seal.number)
    assert seal.validate(schema, True) == [
        "none of the provided schemas is valid",
        "type boolean is not a string",
        "true is not a valid integer number",
    ]


def test_one_of_accepts_single_match(seal):
    schema = seal.one_of(seal.string, seal.number)
    assert seal.validate(schema, "a") == []
    assert seal.validate(schema, 1) == []


def test_one_of_rejects_multiple_matches(seal):
    schema = seal.one_of(seal.number.gte(0), seal.number.lte(10))
    assert seal.validate(schema, 5) == ["more than one schema is valid"]
    assert seal.validate(schema, 20) == []


def test_any_of_aggregates_on_total_failure(seal):
    schema = seal.any_of(seal.string.min(3), seal.number.gt(10))
    assert seal.validate(schema, "a") == [
        "all schemas are invalid",
        "should be longer than 2 symbols",
        "a is not a valid integer number",
    ]
    assert seal.validate(schema, "abc") == []
    assert seal.validate(schema, 11) == []


def test_all_of_requires_every_branch(seal):
    schema = seal.all_of(seal.number.gte(0), seal.number.lte(10), seal.number.integer)
    assert seal.validate(schema, 4) == []
    assert seal.validate(schema, 12.5) == [
        "some of the provided schemas are invalid",
        "shall be less than or equal to 10",
        "shall be an integer",
    ]


def test_not_reports_base_failure(seal):
    schema = seal.not_(seal.number.gte(0), seal.string.length(10))
    assert seal.validate(schema, "str") == ["base schema is invalid", "str is not a valid integer number"]


def test_not_rejects_values_matching_excluded(seal):
    schema = seal.not_(seal.number, seal.number.valid(13))
    assert seal.validate(schema, 12) == []
    assert seal.validate(schema, 13) == ["value must not match the excluded schema"]


def test_combinator_descriptors(seal):
    one_of = seal.one_of(seal.string, seal.number.integer)
    assert isinstance(one_of, OneOfSchema)
    descriptor = one_of.export_metadata()
    assert descriptor["type"] == "oneOf"
    assert [d["type"] for d in descriptor["oneOf"]] == ["string", "integer"]

    negation = seal.not_(seal.number, seal.number.valid(0))
    assert isinstance(negation, NotSchema)
    descriptor = negation.export_metadata()
    assert descriptor["type"] == "not"
    assert descriptor["allOf"][0]["type"] == "number"
    assert descriptor["not"]["valid"] == [0]


def test_combinators_nest_inside_objects(seal):
    schema = seal.object({"value": seal.any_of(seal.string, seal.number)})
    assert seal.validate(schema, {"value": None}) == [
        'key "value" all schemas are invalid',
        'key "value" type object is not a string',
        'key "value" null is not a valid integer number',
    ]
