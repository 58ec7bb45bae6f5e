# Collatz Interval Search Benchmark
# Prove every base from 4 up to N with the interval searcher

from collatz_search import CollatzSearcher, StepResult


def prove_up_to(limit: int) -> int:
    searcher = CollatzSearcher(5)
    while searcher.base_under_test <= limit:
        if searcher.step() is StepResult.CYCLE_DETECTED:
            raise RuntimeError(f"cycle found at {searcher.cycle_value}")
    return searcher.steps

def main():
    limit = 20_000
    steps = prove_up_to(limit)
    print(f"Collatz steps to prove bases 4..{limit}: {steps}")

if __name__ == "__main__":
    main()
