"""Balance a small skewed ring and trace every transfer."""

from balance_config import SimulationConfig
from load_balancer import run_simulation


def run_skewed_ring():
    """Twelve nodes, every third one loaded, traced step by step."""
    config = SimulationConfig(k=12, seed=42, verbose=True)

    result = run_simulation(config)

    print("\n=== Result ===")
    print(f"Outcome: {result.outcome.value}")
    print(f"Time cycles: {result.current_time}")
    print(f"Load balancing activities: {result.iterations}")
    print(f"Total load: {result.initial_load} -> {result.final_load}")
    print(f"Max balanced load difference: {result.balanced_load}")
    print(f"Final loads: {[load for _, load in result.final_snapshot]}")


if __name__ == "__main__":
    run_skewed_ring()
