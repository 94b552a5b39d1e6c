from bootdesk.rand import RAND_MAX, RandomGenerator, rand


def test_first_value_with_default_seed():
    assert RandomGenerator().rand() == 16838


def test_values_in_range():
    gen = RandomGenerator()
    values = [gen.rand() for _ in range(1000)]
    assert all(0 <= v <= RAND_MAX for v in values)


def test_same_seed_same_sequence():
    a = RandomGenerator(12345)
    b = RandomGenerator(12345)
    assert [a.rand() for _ in range(50)] == [b.rand() for _ in range(50)]


def test_different_seeds_diverge():
    a = RandomGenerator(1)
    b = RandomGenerator(2)
    assert [a.rand() for _ in range(10)] != [b.rand() for _ in range(10)]


def test_state_stays_within_32_bits():
    gen = RandomGenerator(0xFFFFFFFF)
    for _ in range(100):
        gen.rand()
        assert 0 <= gen.state <= 0xFFFFFFFF


def test_seed_is_masked():
    a = RandomGenerator(1 + (1 << 32))
    b = RandomGenerator(1)
    assert a.rand() == b.rand()


def test_sequence_is_not_constant():
    gen = RandomGenerator()
    values = {gen.rand() for _ in range(100)}
    assert len(values) > 50


def test_module_rand_in_range():
    values = [rand() for _ in range(200)]
    assert all(0 <= v <= RAND_MAX for v in values)
    assert len(set(values)) > 1