"""
Project 2 — Chain & Step-Size Monitor (console-first)
Python 3.13-safe. NumPy 2.1+, pandas 2.2+

What this does:
- Runs the Metropolis-Hastings sampler on noisy synthetic data
- Sweeps the burn-in cutoff and prints how the posterior mean moves
- Sweeps the gradient-descent learning rate and flags the ones that diverge
- Saves CSVs: mh_chain.csv, gd_trajectory.csv

Why this matters:
- Neither GD nor MH tells you when it is done. Iteration counts are hard stops,
  so you look at the loss curve / chain yourself and pick the cutoff.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd

from quattro import (
    ClosedFormEstimator,
    GradientDescentConfig,
    GradientDescentEstimator,
    MCMCState,
    MetropolisHastingsSampler,
    ThetaVector,
    simulate_linear,
    summarize,
    summarize_sigma,
)

# ---------- CONFIG ----------
SEED = 7
THETA_TRUE = (2.0, 3.0)
N_POINTS = 101
NOISE = 0.5

MH_ITERATIONS = 20_000
MH_INITIAL = MCMCState(theta0=0.0, theta1=0.0, sigma=2.0)
BURN_INS = [0, 500, 1_000, 5_000, 10_000, 15_000]

GD_ITERATIONS = 1_000
LEARNING_RATES = [1e-4, 1e-3, 5e-3, 7.5e-3, 1e-2]   # 1e-2 overshoots on this design

OUT_DIR = Path("quattro_logs")

pd.options.display.float_format = lambda x: f"{x:,.6f}"


def burn_in_sweep(chain, burn_ins) -> pd.DataFrame:
    rows = []
    for b in burn_ins:
        if b >= len(chain):
            continue
        theta = summarize(chain, b)
        rows.append({
            "burn_in": b,
            "kept": len(chain) - b,
            "theta0": theta.theta0,
            "theta1": theta.theta1,
            "sigma": summarize_sigma(chain, b),
        })
    return pd.DataFrame(rows).set_index("burn_in")


def learning_rate_sweep(samples, learning_rates, iterations: int):
    rows = []
    trajectories = {}
    for lr in learning_rates:
        cfg = GradientDescentConfig(learning_rate=lr, iterations=iterations,
                                    initial_theta=ThetaVector(0.0, 0.0))
        line, traj = GradientDescentEstimator(cfg).fit_with_trajectory(samples)
        trajectories[lr] = traj
        rows.append({
            "lr": lr,
            "theta0": line.intercept,
            "theta1": line.slope,
            "loss_first": traj.loss[0],
            "loss_last": traj.loss[-1],
            "diverged": traj.diverged(),
        })
    return pd.DataFrame(rows).set_index("lr"), trajectories


if __name__ == "__main__":
    samples = simulate_linear(*THETA_TRUE, n=N_POINTS, noise=NOISE, seed=SEED)
    exact = ClosedFormEstimator().fit(samples)

    # --------- MH chain ----------
    chain = MetropolisHastingsSampler(verbose_every=5_000).run(
        samples, MH_INITIAL, iterations=MH_ITERATIONS, seed=SEED
    )

    print("\n=== Closed-form reference ===")
    print(f"theta0={exact.intercept:.4f}  theta1={exact.slope:.4f}")

    print("\n=== Burn-in sweep (posterior mean) ===")
    print(burn_in_sweep(chain, BURN_INS))
    print(f"acceptance rate: {chain.acceptance_rate:.4f}")

    # --------- GD step size ----------
    sweep, trajectories = learning_rate_sweep(samples, LEARNING_RATES, GD_ITERATIONS)
    lam_max = float(np.linalg.eigvalsh(samples.design_matrix().T @ samples.design_matrix()).max())

    print("\n=== Gradient descent learning-rate sweep ===")
    print(f"stable iff lr < 1 / lambda_max(X^T X) = {1.0 / lam_max:.6f}")
    print(sweep)

    # --------- save ----------
    OUT_DIR.mkdir(exist_ok=True)
    chain.to_frame().to_csv(OUT_DIR / "mh_chain.csv")
    best_lr = max(lr for lr in LEARNING_RATES if not sweep.loc[lr, "diverged"])
    trajectories[best_lr].to_frame().to_csv(OUT_DIR / "gd_trajectory.csv")
    print(f"\nSaved {OUT_DIR / 'mh_chain.csv'} and {OUT_DIR / 'gd_trajectory.csv'} (lr={best_lr})")
