import argparse
import time
from concurrent.futures import ProcessPoolExecutor

from policies import POLICIES
from simulator import resolve_algorithm
from trace_generator import TRACE_LENGTH, generate_trial_trace

TRIALS = 1000
MIN_WSS = 4
MAX_WSS = 20
ALGORITHMS = ('LRU', 'FIFO', 'Clock')


def run_trial(trial, seed, trace_length=TRACE_LENGTH,
              wss_range=range(MIN_WSS, MAX_WSS + 1), algorithms=ALGORITHMS,
              legacy_clock=False):
    """
    Run one trial: build its trace, then every policy at every working set
    size against that same trace. Returns {(algorithm, wss): page_faults}.

    legacy_clock runs Clock with drop_after_circuit.
    """
    trace = generate_trial_trace(trial, seed, length=trace_length)
    faults = {}
    for wss in wss_range:
        for algorithm in algorithms:
            options = {}
            if algorithm == 'Clock' and legacy_clock:
                options['drop_after_circuit'] = True
            faults[(algorithm, wss)] = POLICIES[algorithm].run(wss, trace, **options)
    return faults


class ExperimentResults:
    def __init__(self, algorithms, wss_range, trials):
        self.algorithms = tuple(algorithms)
        self.wss_range = tuple(wss_range)
        self.trials = trials
        self.totals = {(algorithm, wss): 0
                       for wss in self.wss_range for algorithm in self.algorithms}
        self.completed = 0

    def add_trial(self, faults):
        for key, count in faults.items():
            self.totals[key] += count
        self.completed += 1

    def averages(self):
        assert self.completed == self.trials, \
            f"only {self.completed} of {self.trials} trials accumulated"
        return {key: total // self.trials for key, total in self.totals.items()}


class MonteCarloExperiment:

    def __init__(self, trials=TRIALS, trace_length=TRACE_LENGTH,
                 wss_range=range(MIN_WSS, MAX_WSS + 1), algorithms=ALGORITHMS,
                 random_seed=None, workers=1, legacy_clock=False,
                 verbose=False):
        if trials < 1:
            raise ValueError(f"trials must be positive, got {trials}")
        self.trials = trials
        self.trace_length = trace_length
        self.wss_range = tuple(wss_range)
        self.algorithms = tuple(resolve_algorithm(a) for a in algorithms)
        self.workers = workers
        self.legacy_clock = legacy_clock
        self.verbose = verbose

        if random_seed is None:
            random_seed = int(time.time() * 1000000) % (2**31)
        self.random_seed = random_seed

    def _trial_args(self):
        for trial in range(self.trials):
            yield (trial, self.random_seed, self.trace_length,
                   self.wss_range, self.algorithms, self.legacy_clock)

    def run(self):
        results = ExperimentResults(self.algorithms, self.wss_range,
                                    self.trials)
        start = time.time()

        if self.verbose:
            print(f"\n{'='*60}")
            print(f"Running {self.trials} trials of {self.trace_length} references "
                  f"(seed {self.random_seed}, workers {self.workers})")
            print(f"{'='*60}")

        if self.workers > 1:
            with ProcessPoolExecutor(max_workers=self.workers) as executor:
                futures = [executor.submit(run_trial, *args)
                           for args in self._trial_args()]
                for future in futures:
                    results.add_trial(future.result())
        else:
            for args in self._trial_args():
                results.add_trial(run_trial(*args))

        if self.verbose:
            print(f"Finished in {time.time() - start:.2f}s")
            print(f"{'='*60}\n")

        return results


def format_report(averages, algorithms=ALGORITHMS):
    lines = []
    for wss in sorted({wss for _, wss in averages}):
        for algorithm in algorithms:
            lines.append(f"{wss} {algorithm}: {averages[(algorithm, wss)]}")
        lines.append("")
    return "\n".join(lines)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Monte Carlo comparison of LRU, FIFO and Clock page replacement.")
    parser.add_argument("--trials", type=int, default=TRIALS,
                        help="number of independent traces (default: %(default)s)")
    parser.add_argument("--trace-length", type=int, default=TRACE_LENGTH,
                        help="references per trace (default: %(default)s)")
    parser.add_argument("--min-wss", type=int, default=MIN_WSS,
                        help="smallest working set size (default: %(default)s)")
    parser.add_argument("--max-wss", type=int, default=MAX_WSS,
                        help="largest working set size (default: %(default)s)")
    parser.add_argument("-s", "--seed", type=int, default=None,
                        help="random seed; the clock is used when omitted")
    parser.add_argument("-w", "--workers", type=int, default=1,
                        help="worker processes for the trials (default: %(default)s)")
    parser.add_argument("--plot", metavar="FILE", default=None,
                        help="also save a graph of the averages to FILE")
    parser.add_argument("--legacy-clock", action="store_true",
                        help="Clock gives up after one sweep when every use bit is set")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="print the seed and timing around the run")
    args = parser.parse_args(argv)

    if args.min_wss < 1 or args.max_wss < args.min_wss:
        parser.error("working set sizes need 1 <= --min-wss <= --max-wss")
    if args.trials < 1 or args.trace_length < 1 or args.workers < 1:
        parser.error("--trials, --trace-length and --workers must be positive")
    return args


def main(argv=None):
    args = parse_args(argv)

    experiment = MonteCarloExperiment(
        trials=args.trials,
        trace_length=args.trace_length,
        wss_range=range(args.min_wss, args.max_wss + 1),
        random_seed=args.seed,
        workers=args.workers,
        legacy_clock=args.legacy_clock,
        verbose=args.verbose,
    )
    averages = experiment.run().averages()
    print(format_report(averages, experiment.algorithms))

    if args.plot:
        from generate_graphs import plot_results
        plot_results(averages, args.plot, algorithms=experiment.algorithms)
        print(f"Graph saved as '{args.plot}'")

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
