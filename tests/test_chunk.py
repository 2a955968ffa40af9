import logging

from chunkrand.chunk import ChunkRandom
from chunkrand.lcg import JAVA, JAVA_REVERSE
from chunkrand.rng import JavaRandom, MASK48, scramble

def test_reference_sequence():
    cr = ChunkRandom()
    cr.get_random(94824734)
    assert cr.get_seed_state() == 25153900403
    cr.rand.next_long()
    assert cr.get_seed_state() == 135493623266021

def test_population_seed_origin_is_world_seed():
    cr = ChunkRandom()
    assert cr.set_population_seed(-8_675_309, 0, 0) == -8_675_309
    assert cr.get_seed_state() == scramble(-8_675_309)

def test_population_seed_is_unmasked():
    cr = ChunkRandom()
    # Random(0).nextLong() | 1, xor 0
    derived = cr.set_population_seed(0, 1, 0)
    assert derived == -4962768465676381895
    assert derived < 0
    assert cr.get_seed_state() == scramble(derived)
    assert 0 <= cr.get_seed_state() <= MASK48

def test_seed_mixing_is_silent(caplog):
    caplog.set_level(logging.DEBUG)
    cr = ChunkRandom()
    for x in range(10):
        cr.set_population_seed(7, x, -x)
        cr.set_decorator_seed(7, x, 3)
    assert caplog.records == []

def test_population_seed_formula():
    world = 0x1234_5678_9ABC
    r = JavaRandom.from_seed(world)
    s1 = r.next_long() | 1
    s2 = r.next_long() | 1
    x, z = -37, 1025
    want = s1 * x + s2 * z
    want = ((want + (1 << 63)) % (1 << 64) - (1 << 63)) ^ world

    cr = ChunkRandom()
    assert cr.population_seed(world, x, z) == want

def test_population_seed_deterministic():
    a, b = ChunkRandom(), ChunkRandom()
    b.get_random(999)
    b.rand.next_long()
    for x, z in ((0, 1), (-1, -1), (2**31 - 1, -(2**31))):
        assert a.set_population_seed(42, x, z) == b.set_population_seed(42, x, z)
        assert a.get_seed_state() == b.get_seed_state()
        state = a.get_seed_state()
        a.rand.next_long()
        a.set_population_seed(42, x, z)
        assert a.get_seed_state() == state

def test_decorator_seed():
    cr = ChunkRandom()
    assert cr.set_decorator_seed(100, 3, 2) == 20103
    assert cr.get_seed_state() == scramble(20103)
    assert cr.decorator_seed(100, 3, 2) == 20103

def test_decorator_seed_short_wraparound():
    cr = ChunkRandom()
    # index/step are 16-bit: 0x8000 reads as -32768
    assert cr.set_decorator_seed(0, 0x8000, 0) == -32768
    assert cr.set_decorator_seed(0, 0, -1) == -10000

def test_decorator_seed_wraps_64_bit():
    cr = ChunkRandom()
    assert cr.set_decorator_seed((1 << 63) - 1, 1, 0) == -(1 << 63)

def test_random_next_both_directions():
    cr = ChunkRandom()
    cr.get_random(0)
    assert cr.random_next(32, JAVA) == -1155484576
    assert cr.random_next(32, JAVA) == -723955400
    cr.random_next(32, JAVA_REVERSE)
    cr.random_next(32, JAVA_REVERSE)
    assert cr.get_seed_state() == scramble(0)

def test_reseed_loops_back():
    cr = ChunkRandom()
    cr.set_population_seed(1, 2, 3)
    first = cr.rand.next_int(100)
    cr.rand.next_float()
    cr.set_population_seed(1, 2, 3)
    assert cr.rand.next_int(100) == first
