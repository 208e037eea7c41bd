import random
import string

from fluentkit.captcha import Captcha, generate_code


def test_code_shape():
    for seed in range(50):
        code = generate_code(random.Random(seed))
        assert len(code) == 4
        assert all(c in string.ascii_letters + string.digits for c in code)


def test_deterministic_with_seed():
    assert Captcha(rng=random.Random(7)).code == generate_code(random.Random(7))


def test_verify_exact():
    captcha = Captcha(rng=random.Random(3))
    assert captcha.verify(captcha.code)
    assert not captcha.verify(captcha.code + "x")


def test_verify_case_sensitivity():
    rng_seed = next(
        s for s in range(1000) if any(c.isalpha() for c in generate_code(random.Random(s)))
    )
    strict = Captcha(rng=random.Random(rng_seed))
    assert not strict.verify(strict.code.swapcase())
    loose = Captcha(ignore_case=True, rng=random.Random(rng_seed))
    assert loose.verify(loose.code.swapcase())


def test_refresh_draws_next_code():
    rng = random.Random(11)
    expected_first = generate_code(rng)
    expected_second = generate_code(rng)
    captcha = Captcha(rng=random.Random(11))
    assert captcha.code == expected_first
    seen = []
    captcha.signal("updated").connect(lambda: seen.append(captcha.code))
    captcha.refresh()
    assert seen == [expected_second]