#!/usr/bin/env python3
"""
Print a table of basic invariants of GP(n, k) for every valid k and a
range of n: vertex/edge counts, inner cycle structure, girth and
bipartiteness (the last two via networkx).

Usage: python3 gp_table.py [--n-min 3] [--n-max 12]
"""

import argparse

import networkx as nx

from gpetersen import generalized_petersen, inner_cycle_structure


def row(n: int, k: int) -> str:
    G = generalized_petersen(n, k)
    cycles, length = inner_cycle_structure(n, k)
    girth = nx.girth(G)
    bip = "yes" if nx.is_bipartite(G) else "no"
    return (
        f"GP({n},{k})".ljust(10)
        + f"{G.number_of_nodes():>4} {G.number_of_edges():>4}"
        + f"   {cycles}x C{length}".ljust(12)
        + f"{girth:>6}   {bip}"
    )


def main():
    ap = argparse.ArgumentParser(description=__doc__,
                                 formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("--n-min", type=int, default=3)
    ap.add_argument("--n-max", type=int, default=12)
    args = ap.parse_args()

    print("graph        |V|  |E|  inner     girth  bipartite")
    for n in range(max(3, args.n_min), args.n_max + 1):
        for k in range(1, (n + 1) // 2):
            print(row(n, k))


if __name__ == "__main__":
    main()
