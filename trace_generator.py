import math
import random

TRACE_LENGTH = 1000
REGION_SIZE = 100    # references per locality region
REGION_STRIDE = 10   # base page increase between regions
TRACE_MU = 10
TRACE_SIGMA = 2


class NormalGenerator:
    """
    Normal deviates from the polar Box-Muller transform.

    Each transform yields two independent deviates; the second one is kept
    and handed out by the next call instead of drawing again.
    """

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.cached = None

    def uniform(self):
        return -1 + self.rng.random() * 2

    def sample(self, mu=0.0, sigma=1.0):
        if self.cached is not None:
            x2, self.cached = self.cached, None
            return mu + sigma * x2

        while True:
            u1 = self.uniform()
            u2 = self.uniform()
            w = u1 * u1 + u2 * u2
            if 0 < w < 1:
                break

        mult = math.sqrt((-2 * math.log(w)) / w)
        self.cached = u2 * mult
        return mu + sigma * (u1 * mult)


def trial_rng(seed, trial):
    # Depends only on (seed, trial) so trials can run in any order or process
    return random.Random(f"{seed}:{trial}")


def generate_trace(generator, length=TRACE_LENGTH, region_size=REGION_SIZE,
                   region_stride=REGION_STRIDE, mu=TRACE_MU, sigma=TRACE_SIGMA):
    return tuple(
        region_stride * (j // region_size) + int(generator.sample(mu, sigma))
        for j in range(length)
    )


def generate_trial_trace(trial, seed, length=TRACE_LENGTH):
    generator = NormalGenerator(trial_rng(seed, trial))
    return generate_trace(generator, length=length)
