"""
Binary Heap Demo -- Extraction order, custom priorities, and operation cost.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from heap import Heap, MinHeap, MaxHeap

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

SIZES = [16, 64, 256, 1024, 4096, 16384]

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}


class CountingOrder:
    """Wraps an order callable and counts how often it is invoked."""

    def __init__(self, order):
        self.order = order
        self.calls = 0

    def __call__(self, a, b):
        self.calls += 1
        return self.order(a, b)


# ---------------------------------------------------------------------------
# Example 1: Min-Heap vs Max-Heap
# ---------------------------------------------------------------------------
def example_1_min_vs_max():
    """Same input, opposite extraction order."""
    print("=" * 60)
    print("Example 1: Min-Heap vs Max-Heap")
    print("=" * 60)

    values = np.random.randint(0, 100, size=20).tolist()
    low = MinHeap.from_iterable(values)
    high = MaxHeap.from_iterable(values)

    print(f"\n  Input:     {values}")
    print(f"  Heap array (min): {low._items[1:low.len() + 1]}")
    print(f"  Heap array (max): {high._items[1:high.len() + 1]}")

    min_order = low.drain()
    max_order = high.drain()
    print(f"  Min-heap drain:   {min_order}")
    print(f"  Max-heap drain:   {max_order}")

    fig, axes = plt.subplots(1, 3, figsize=(18, 5))
    positions = np.arange(len(values))

    axes[0].bar(positions, values, color=COLORS["dark"], edgecolor="white")
    axes[0].set_title("Insertion Order", fontsize=10, fontweight="bold")
    axes[0].set_xlabel("Insert position")
    axes[0].set_ylabel("Value")
    axes[0].grid(True, alpha=0.3, axis="y")

    axes[1].bar(positions, min_order, color=COLORS["blue"], edgecolor="white")
    axes[1].set_title("MinHeap Extraction Order\nAscending", fontsize=10, fontweight="bold")
    axes[1].set_xlabel("Extraction step")
    axes[1].grid(True, alpha=0.3, axis="y")

    axes[2].bar(positions, max_order, color=COLORS["red"], edgecolor="white")
    axes[2].set_title("MaxHeap Extraction Order\nDescending", fontsize=10, fontweight="bold")
    axes[2].set_xlabel("Extraction step")
    axes[2].grid(True, alpha=0.3, axis="y")

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "01_min_vs_max.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("  Saved: viz/01_min_vs_max.png")


# ---------------------------------------------------------------------------
# Example 2: Custom Orderings
# ---------------------------------------------------------------------------
def example_2_custom_orderings():
    """Any two-argument predicate defines the priority."""
    print("\n" + "=" * 60)
    print("Example 2: Custom Orderings")
    print("=" * 60)

    values = np.random.randint(-50, 50, size=15).tolist()
    by_abs = Heap.from_iterable(values, lambda a, b: abs(a) < abs(b)).drain()
    natural = MinHeap.from_iterable(values).drain()
    print(f"\n  Input:             {values}")
    print(f"  Natural min order: {natural}")
    print(f"  Absolute value:    {by_abs}")

    tasks = [(2, "write report"), (5, "page on-call"), (1, "tidy desk"),
             (4, "fix build"), (3, "review patch")]
    queue = Heap.from_iterable(tasks, lambda a, b: a[0] > b[0])
    print("\n  Task queue (highest priority first):")
    for priority, name in queue:
        print(f"    [{priority}] {name}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    steps = np.arange(len(values))
    axes[0].plot(steps, natural, "o-", color=COLORS["blue"], label="a < b")
    axes[0].plot(steps, by_abs, "s-", color=COLORS["orange"], label="|a| < |b|")
    axes[0].set_title("Extraction Order Under Two Predicates", fontsize=10, fontweight="bold")
    axes[0].set_xlabel("Extraction step")
    axes[0].set_ylabel("Value")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(steps, np.abs(by_abs), "s-", color=COLORS["orange"])
    axes[1].set_title("|value| of Absolute-Order Extraction\nNon-decreasing",
                      fontsize=10, fontweight="bold")
    axes[1].set_xlabel("Extraction step")
    axes[1].set_ylabel("|Value|")
    axes[1].grid(True, alpha=0.3)

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "02_custom_orderings.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("  Saved: viz/02_custom_orderings.png")


# ---------------------------------------------------------------------------
# Example 3: Operation Cost
# ---------------------------------------------------------------------------
def example_3_operation_cost():
    """Comparisons per add/extract against log2(n), and heap sort timing."""
    print("\n" + "=" * 60)
    print("Example 3: Operation Cost")
    print("=" * 60)

    add_costs = []
    extract_costs = []
    heap_times = []
    sorted_times = []

    for n in SIZES:
        values = np.random.randint(0, 10 * n, size=n).tolist()

        counter = CountingOrder(lambda a, b: a < b)
        heap = Heap(counter)
        for v in values:
            heap.add(v)
        add_costs.append(counter.calls / n)

        counter.calls = 0
        heap.drain()
        extract_costs.append(counter.calls / n)

        t0 = time.perf_counter()
        MinHeap.from_iterable(values).drain()
        heap_times.append(time.perf_counter() - t0)

        t0 = time.perf_counter()
        sorted(values)
        sorted_times.append(time.perf_counter() - t0)

        print(f"  n={n:6d}  cmp/add={add_costs[-1]:5.2f}  cmp/extract={extract_costs[-1]:6.2f}"
              f"  heap sort={heap_times[-1] * 1e3:8.2f} ms  sorted={sorted_times[-1] * 1e3:6.2f} ms")

    log_n = np.log2(SIZES)

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    axes[0].plot(SIZES, add_costs, "o-", color=COLORS["green"], label="add")
    axes[0].plot(SIZES, extract_costs, "s-", color=COLORS["purple"], label="extract")
    axes[0].plot(SIZES, 2 * log_n, "--", color=COLORS["dark"], label="2 log2(n)")
    axes[0].set_xscale("log", base=2)
    axes[0].set_title("Comparisons per Operation\nextract is O(log n), random adds are O(1) on average",
                      fontsize=10, fontweight="bold")
    axes[0].set_xlabel("n")
    axes[0].set_ylabel("Comparisons")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].loglog(SIZES, np.array(heap_times) * 1e3, "o-", color=COLORS["blue"], label="Heap drain")
    axes[1].loglog(SIZES, np.array(sorted_times) * 1e3, "s-", color=COLORS["red"], label="sorted()")
    axes[1].set_title("Wall-Clock Sort Time", fontsize=10, fontweight="bold")
    axes[1].set_xlabel("n")
    axes[1].set_ylabel("Time (ms)")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "03_operation_cost.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("  Saved: viz/03_operation_cost.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    print("\n" + "=" * 60)
    print("Generating PDF report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    titles = {
        "01_min_vs_max.png": "Example 1: Min-Heap vs Max-Heap",
        "02_custom_orderings.png": "Example 2: Custom Orderings",
        "03_operation_cost.png": "Example 3: Operation Cost",
    }

    with PdfPages(str(report_path)) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        ax = fig.add_axes([0, 0, 1, 1])
        ax.axis("off")
        ax.text(0.5, 0.7, "Binary Heap", fontsize=28, ha="center", fontweight="bold",
                transform=ax.transAxes)
        ax.text(0.5, 0.6, "1-indexed array heap with a pluggable ordering",
                fontsize=14, ha="center", transform=ax.transAxes)
        ax.text(0.5, 0.45, f"Seed: {SEED}\nSizes: {SIZES}", fontsize=11, ha="center",
                transform=ax.transAxes, family="monospace")
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Binary Heap Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_min_vs_max()
    example_2_custom_orderings()
    example_3_operation_cost()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
