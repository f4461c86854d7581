from arenagen.seed import derive_floor_seed, hash_string


def test_numeric_seed_is_linear_in_floor_and_retry():
    assert derive_floor_seed(12345, 0) == 12345
    assert derive_floor_seed(12345, 5) == 17345
    assert derive_floor_seed(12345, 5, retry=2) == 17545


def test_hash_string_matches_31_multiplier_hash():
    # Same values as Java's String.hashCode for these inputs
    assert hash_string("") == 0
    assert hash_string("abc") == 96354
    assert hash_string("hello") == 99162322


def test_hash_string_wraps_and_stays_non_negative():
    for text in ["test", "hello", "world", "12345", "abc-xyz", "x" * 500, "floor-seed-" * 40]:
        h = hash_string(text)
        assert 0 <= h <= 2 ** 31


def test_string_seed_is_deterministic():
    assert derive_floor_seed("test-seed", 5) == derive_floor_seed("test-seed", 5)
    assert derive_floor_seed("test-seed", 5) == hash_string("test-seed-floor5-retry0")


def test_string_seed_differs_per_floor_and_retry():
    seeds = {derive_floor_seed("run-a", floor, retry) for floor in range(1, 21) for retry in range(4)}
    assert len(seeds) == 80


def test_lone_surrogate_hashes_as_its_code_unit():
    # "a" then the unpaired low surrogate 0xDC80
    assert hash_string("a\udc80") == 0x61 * 31 + 0xDC80


def test_undecodable_env_seed_still_derives():
    seed = derive_floor_seed("run\udc80", 3)
    assert seed >= 0
    assert seed == derive_floor_seed("run\udc80", 3)


def test_negative_integer_base_gives_non_negative_seed():
    assert derive_floor_seed(-5000, 1) == 4000
    assert derive_floor_seed(-12345, 0) == 12345
    assert all(derive_floor_seed(-20000, floor, retry) >= 0 for floor in range(25) for retry in range(4))
