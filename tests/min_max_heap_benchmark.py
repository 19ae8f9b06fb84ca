import os
import sys
import csv
import random
import time
import statistics

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from minmaxheap import MinMaxHeap

OUTPUT_CSV = "min_max_heap_performance.csv"
BASE_INPUT = 100
SIZE_STEPS = 12
ITERATIONS = 5

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int):
    """Generate a list of random integers of given size."""
    return [random.randint(0, 1000000) for _ in range(size)]

def measure_operation_time(operation, input_size: int, iterations: int = ITERATIONS):
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev

def measure_space_efficiency(operation, input_size: int, iterations: int = 3):
    """Return average memory held by the heap and its elements (bytes)."""
    sizes = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        heap = operation(data)
        items = heap.to_list()
        total_size = sys.getsizeof(heap) + sys.getsizeof(items)
        for item in items:
            total_size += sys.getsizeof(item)
        sizes.append(total_size)
    return statistics.mean(sizes)

# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_insert(data):
    heap = MinMaxHeap()
    for item in data:
        heap.insert(item)
    return heap

def bench_extract_min(data):
    heap = MinMaxHeap(data)
    while len(heap) > 0:
        heap.extract_min()
    return heap

def bench_extract_max(data):
    heap = MinMaxHeap(data)
    while len(heap) > 0:
        heap.extract_max()
    return heap

def bench_alternating_drain(data):
    heap = MinMaxHeap(data)
    take_min = True
    while len(heap) > 0:
        if take_min:
            heap.extract_min()
        else:
            heap.extract_max()
        take_min = not take_min
    return heap

def bench_peek(data):
    heap = MinMaxHeap(data)
    for _ in range(min(3, len(data))):
        _ = heap.peek_min()
        _ = heap.peek_max()
    return heap

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = BASE_INPUT):
    """Run exponential performance tests for MinMaxHeap operations."""
    operations = {
        "insert": bench_insert,
        "extract_min": bench_extract_min,
        "extract_max": bench_extract_max,
        "alternating": bench_alternating_drain,
        "peek": bench_peek,
    }

    input_sizes = [base_input * (2 ** i) for i in range(SIZE_STEPS)]

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([
            "Input Size",
            "Operation",
            "Average Time (ms)",
            "Standard Deviation (ms)",
            "Average Space (bytes)"
        ])

        for op_name, op_func in operations.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size)
                avg_space = measure_space_efficiency(op_func, size)
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"])
                print(f"{op_name:<12} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms | Avg Space: {avg_space:.0f} bytes")

    print(f"\nBenchmark completed. Results saved to {output_file}")

# ----------------------------
# Main Entry Point
# ----------------------------

if __name__ == "__main__":
    run_benchmarks(OUTPUT_CSV, base_input=BASE_INPUT)
