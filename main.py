#!/usr/bin/env python3
"""
Gaussian belief demo
Builds a belief from the command line, checks it and draws samples from it
"""

import sys
import logging
import argparse
import numpy as np
from mvgaussian import BeliefError, GaussianBelief


def parse_array(text):
    """Parse '1,3' into a vector and '2,0;0,2' (or '2;' for 1x1) into a matrix."""
    if text is None:
        return None
    rows = [[float(x) for x in row.split(',')] for row in text.split(';') if row.strip()]
    if ';' in text:
        return np.array(rows)
    return np.array(rows[0])


def build_belief(args):
    """Create the belief described by the parsed arguments."""
    if args.vague is not None:
        return GaussianBelief.vague(dim=args.vague)
    return GaussianBelief(
        mean=parse_array(args.mean),
        covariance=parse_array(args.covariance),
        precision=parse_array(args.precision),
        weighted_mean=parse_array(args.weighted_mean)
    )


def main(argv=None):
    """Main function with argument parsing."""
    parser = argparse.ArgumentParser(description='Multivariate Gaussian belief demo')

    parser.add_argument('-m', '--mean', type=str,
                       help="Mean vector, e.g. '1,3'")

    parser.add_argument('-V', '--covariance', type=str,
                       help="Covariance matrix with rows separated by ';', e.g. '2,0;0,2'")

    parser.add_argument('-W', '--precision', type=str,
                       help="Precision matrix with rows separated by ';'")

    parser.add_argument('-x', '--weighted-mean', type=str,
                       help="Weighted mean vector (precision times mean)")

    parser.add_argument('--vague', type=int, default=None, metavar='DIM',
                       help='Use a vague prior of the given dimension instead')

    parser.add_argument('-n', '--num-samples', type=int, default=5,
                       help='Number of samples to draw')

    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed for sampling')

    parser.add_argument('--plot', action='store_true',
                       help='Plot the uncertainty ellipse and samples (2-D beliefs and up)')

    parser.add_argument('-v', '--verbose', action='store_true',
                       help='Log lazy parameter derivations')

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        belief = build_belief(args)
        print(f"=== {belief} ===")
        print(f"• Well defined: {belief.is_well_defined()}")
        print(f"• Proper: {belief.is_proper()}")
        print(f"• Consistent: {belief.is_consistent()}")
        print(f"• Mean: {belief.get_mean()}")
        print(f"• Variance: {belief.get_variance()}")

        if not belief.is_proper():
            print("Belief is improper, skipping sampling")
            return 0

        rng = np.random.default_rng(args.seed)
        samples = belief.sample(rng=rng, size=args.num_samples)
        print(f"\n{args.num_samples} samples:")
        for s in samples:
            print(f"  {s}")
    except BeliefError as e:
        print(f"Error: {e}")
        return 1

    if args.plot:
        import matplotlib.pyplot as plt
        from mvgaussian.visualization import plot_belief_ellipse, plot_belief_samples

        if belief.dimension < 2:
            print("Plotting needs a belief of dimension 2 or more")
            return 1
        fig, ax = plt.subplots(figsize=(6, 6))
        plot_belief_samples(ax, belief, num_samples=max(args.num_samples, 200), rng=rng)
        plot_belief_ellipse(ax, belief, n_std=2.0)
        ax.set_title(str(belief), fontsize=10)
        ax.set_aspect('equal')
        ax.autoscale_view()
        plt.show()

    return 0


if __name__ == "__main__":
    sys.exit(main())
