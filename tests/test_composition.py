from imagine_gen.core.config import FieldConfig, TableConfig
from imagine_gen.core.rng import RNG
from imagine_gen.core.seed import get_global_rng, seed
from imagine_gen.dataset.tables import build_table
from imagine_gen.generators import ids, location, number, person, text, util


def test_full_name_uses_one_child_seed_per_part():
    rng = RNG(2024)
    first = person.first_name(seed=rng.child_seed())
    last = person.last_name(seed=rng.child_seed())
    assert person.full_name(seed=2024) == f"{first} {last}"


def test_address_children_follow_parent_draws():
    rng = RNG("addr")
    rng.next()  # street number
    rng.next()  # street name
    rng.next()  # street type
    town = location.city(seed=rng.child_seed())
    code = location.country_code(seed=rng.child_seed())
    postal = location.zip(seed=rng.child_seed())
    assert location.address(seed="addr").endswith(f", {town} {postal}, {code}")


def test_string_is_chars_from_child_seeds():
    rng = RNG(77)
    expected = "".join(text.char("xyz", seed=rng.child_seed()) for _ in range(12))
    assert text.string(12, "xyz", seed=77) == expected


def test_composite_replays_from_outer_seed():
    schema = {"name": lambda: person.full_name(), "city": lambda: location.city()}
    assert util.object_many(4, schema, seed=1) == util.object_many(4, schema, seed=1)


def _table(first_field):
    return TableConfig(name="t", rows=20, fields={
        "a": first_field,
        "b": FieldConfig(generator="text.word"),
        "c": FieldConfig(generator="number.integer", args=(0, 10**6)),
    })


def test_changing_one_field_leaves_siblings_alone():
    one = build_table(RNG(9), _table(FieldConfig(generator="ids.uuid")))
    other = build_table(RNG(9), _table(FieldConfig(generator="person.password", kwargs={"length": 30})))
    assert one["a"].tolist() != other["a"].tolist()
    assert one["b"].tolist() == other["b"].tolist()
    assert one["c"].tolist() == other["c"].tolist()


def test_local_seed_ignores_global_reseed():
    schema = {"id": lambda: ids.uuid(), "word": lambda: text.word()}
    seed(1)
    first = util.object_many(2, schema, seed="k")
    seed(2)
    second = util.object_many(2, schema, seed="k")
    assert first == second


def test_seeded_array_and_frame_replay_under_any_global_seed():
    seed(10)
    arr = util.array(3, lambda: number.integer(0, 10**9), seed=5)
    df = util.frame(3, {"n": lambda: number.integer(0, 10**9)}, seed=5)
    seed(11)
    assert util.array(3, lambda: number.integer(0, 10**9), seed=5) == arr
    assert util.frame(3, {"n": lambda: number.integer(0, 10**9)}, seed=5).equals(df)


def test_seeded_composite_leaves_global_stream_alone():
    seed(3)
    before = get_global_rng().state
    util.object({"a": lambda: person.full_name(), "b": 1}, seed=8)
    assert get_global_rng().state == before
