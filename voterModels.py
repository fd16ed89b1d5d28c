from collections import Counter
from string import ascii_lowercase

import numpy as np
from numpy import argsort, floor
import scipy.stats as stats

from mydecorators import autoassign
from debugDump import *
from dataClasses import *


def candidateNames(ncand):
    """Names for ncand generated candidates.

    >>> candidateNames(3)
    ['a', 'b', 'c']
    >>> candidateNames(28)[-3:]
    ['z', 'c26', 'c27']
    """
    return [ascii_lowercase[i] if i < 26 else "c{}".format(i) for i in range(ncand)]

def collapse(rankings, weights=None):
    """Groups identical rankings into (weight, ranking) pairs, in first-seen order.

    Each ranking counts once unless weights are given.

    >>> collapse([("a", "b"), ("b", "a"), ("a", "b")])
    [(2, ('a', 'b')), (1, ('b', 'a'))]
    >>> collapse([("a", "b"), ("b", "a"), ("a", "b")], [5, 0, 2])
    [(7, ('a', 'b'))]
    """
    if weights is None:
        weights = [1] * len(rankings)
    counts = Counter()
    for ranking, weight in zip(rankings, weights):
        if weight > 0:
            counts[tuple(ranking)] += int(weight)
    return [(w, r) for r, w in counts.items()]


class RandomModel:
    """Impartial culture: every voter ranks the candidates in a uniformly random order.

    Models are election factories: call one with a number of voters and a
    number of candidates (and optionally a seed) to get an Election.

    >>> e = RandomModel()(50, 4, seed=1)
    >>> e.totalWeight, e.candidateOrder
    (50, ('a', 'b', 'c', 'd'))
    >>> all(len(b) == 4 for w, b in e.ballots)
    True
    >>> e == RandomModel()(50, 4, seed=1)
    True
    """

    def __str__(self):
        return self.__class__.__name__

    def __call__(self, nvot, ncand, seed=None):
        rng = np.random.default_rng(seed)
        cands = candidateNames(ncand)
        rankings = [[cands[i] for i in rng.permutation(ncand)] for v in range(nvot)]
        election = Election(cands, collapse(rankings))
        debug(self, "made", len(election.ballots), "distinct ballots for", nvot, "voters")
        return election

class DeterministicModel(RandomModel):
    """Basically, a somewhat non-boring stub for testing.

    Voter j ranks the candidates rotated left by j % modulo.

        >>> e = DeterministicModel(3)(4, 3)
        >>> e
        Election(('a', 'b', 'c'), [(2, ('a', 'b', 'c')), (1, ('b', 'c', 'a')), (1, ('c', 'a', 'b'))])
        >>> e.plurality_winner(), e.condorcet_winner()
        ('a', None)
    """

    @autoassign
    def __init__(self, modulo):
        pass

    def __call__(self, nvot, ncand, seed=None):
        cands = candidateNames(ncand)
        rankings = []
        for j in range(nvot):
            shift = j % self.modulo
            rankings.append(cands[shift:] + cands[:shift])
        return Election(cands, collapse(rankings))

class PolyaModel(RandomModel):
    """This creates electorates based on a Polya urn over rankings.
    You start with an "urn" of seedVoters random rankings, plus alpha
    "wildcard" weight. Then you draw from the urn and put back the ranking
    drawn plus a copy of it. If you draw the "wildcard", add a new random ranking.
    alpha may be any non-negative number.

    The result has far fewer distinct ballots than impartial culture, and
    far more Condorcet winners.

    >>> e = PolyaModel(seedVoters=2, alpha=1)(200, 5, seed=7)
    >>> e.totalWeight
    200
    >>> len(e.ballots) < 200
    True
    >>> PolyaModel(alpha=0.5)(20, 3, seed=1).totalWeight
    20
    >>> PolyaModel(alpha=-1)
    Traceback (most recent call last):
      ...
    ValueError: alpha must be non-negative, got -1
    """

    @autoassign
    def __init__(self, seedVoters=2, alpha=1):
        if alpha < 0:
            raise ValueError("alpha must be non-negative, got {}".format(alpha))

    def __call__(self, nvot, ncand, seed=None):
        rng = np.random.default_rng(seed)
        cands = candidateNames(ncand)
        fresh = lambda: [cands[i] for i in rng.permutation(ncand)]
        urn = [fresh() for i in range(min(self.seedVoters, nvot))]
        while len(urn) < nvot:
            r = rng.random() * (len(urn) + self.alpha)
            if r < len(urn):
                urn.append(urn[int(r)])
            else:
                urn.append(fresh())
        election = Election(cands, collapse(urn))
        debug(self, "made", len(election.ballots), "distinct ballots for", nvot, "voters")
        return election

class DirichletModel(RandomModel):
    """nblocs voting blocs, each with one random ranking and a share of the
    voters drawn from a symmetric Dirichlet(alpha) distribution.

    Small alpha gives lopsided blocs, large alpha even ones.

    >>> e = DirichletModel(nblocs=4, alpha=0.5)(101, 3, seed=3)
    >>> e.totalWeight
    101
    >>> len(e.ballots) <= 4
    True
    >>> str(DirichletModel(nblocs=4, alpha=0.5))
    'DirichletModel_4_0.5'
    """

    @autoassign
    def __init__(self, nblocs=3, alpha=1.0):
        pass

    def __str__(self):
        return "_".join(str(x) for x in (self.__class__.__name__, self.nblocs, self.alpha))

    @staticmethod
    def blocSizes(shares, nvot):
        """Whole numbers of voters proportional to shares, summing to nvot (largest remainders).

        >>> DirichletModel.blocSizes(np.array([0.5, 0.3, 0.2]), 7)
        [4, 2, 1]
        """
        raw = shares * nvot
        sizes = floor(raw).astype(int)
        short = nvot - int(sizes.sum())
        sizes[argsort(sizes - raw)[:short]] += 1
        return [int(s) for s in sizes]

    def __call__(self, nvot, ncand, seed=None):
        rng = np.random.default_rng(seed)
        cands = candidateNames(ncand)
        shares = stats.dirichlet.rvs([self.alpha] * self.nblocs, random_state=rng)[0]
        rankings = [[cands[i] for i in rng.permutation(ncand)] for b in range(self.nblocs)]
        election = Election(cands, collapse(rankings, self.blocSizes(shares, nvot)))
        debug(self, "bloc shares", shares)
        return election
