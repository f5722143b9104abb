import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

ALGORITHMS = ['LRU', 'FIFO', 'Clock']
MARKERS = {'LRU': 'x', 'FIFO': 'o', 'Clock': 's'}


def plot_results(averages, filename, algorithms=ALGORITHMS, title=None):
    wss_values = sorted({wss for _, wss in averages})

    fig, ax = plt.subplots(figsize=(8, 5))
    for algorithm in algorithms:
        faults = [averages[(algorithm, wss)] for wss in wss_values]
        ax.plot(wss_values, faults, label=algorithm,
                marker=MARKERS.get(algorithm, '.'))

    ax.set_title(title or 'Average Page Faults vs Working Set Size',
                 fontsize=14, fontweight='bold')
    ax.set_xlabel('Working Set Size (frames)')
    ax.set_ylabel('Average Page Faults')
    ax.set_xticks(wss_values)
    ax.grid(alpha=0.3)
    ax.legend(frameon=True)

    fig.tight_layout()
    fig.savefig(filename, dpi=300, bbox_inches='tight')
    plt.close(fig)
    return filename


def main():
    from montecarlo import MonteCarloExperiment, format_report

    print("Running simulations...")
    experiment = MonteCarloExperiment(trials=100, random_seed=0)
    averages = experiment.run().averages()
    print(format_report(averages))

    plot_results(averages, 'algorithm_comparison.png')
    print("\nGraph saved as 'algorithm_comparison.png'")


if __name__ == '__main__':
    main()
