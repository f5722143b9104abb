from policies import POLICIES


def resolve_algorithm(algorithm):
    for name in POLICIES:
        if name.lower() == str(algorithm).lower():
            return name
    raise ValueError(f"Unknown algorithm: {algorithm}")


class PageReplacementSimulator:

    def __init__(self, algorithm='FIFO', wss=4, **policy_options):
        self.algorithm = resolve_algorithm(algorithm)
        self.policy = POLICIES[self.algorithm](wss, **policy_options)
        self.stats = self.policy.stats

    @property
    def wss(self):
        return self.policy.wss

    def handle_memory_reference(self, page_num):
        return self.policy.access(page_num)

    def run_simulation(self, trace, verbose=False):
        if verbose:
            print(f"\n{'='*60}")
            print(f"Running {self.algorithm} algorithm with {self.wss} frames "
                  f"on {len(trace)} references")
            print(f"{'='*60}")

        for page_num in trace:
            self.handle_memory_reference(page_num)

        if verbose:
            print(f"\nResults:")
            print(self.stats)
            print(f"{'='*60}\n")

        return self.stats
