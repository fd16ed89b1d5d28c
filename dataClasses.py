import numbers
from collections import namedtuple

from mydecorators import cached_property
from debugDump import *


class BallotError(ValueError):
    """A ballot breaks the contract an election method relies on.

    Raised for a candidate ranked twice, for a pairwise query on a ballot that
    ranks neither candidate, and for a plurality tally on a ballot with no
    usable first choice. These are caller errors, not election outcomes: an
    undecided election is reported as a None winner instead.
    """


##Ballots
class RankedBallot(tuple):
    """A tuple of candidates, strictly decreasing in preference.

    Index 0 is the most preferred candidate. Candidates can be any hashable
    values; a candidate may only be ranked once.

        >>> b = RankedBallot(["a", "b", "c"])
        >>> b.top, len(b)
        ('a', 3)
        >>> RankedBallot(["a", "b", "a"])
        Traceback (most recent call last):
          ...
        dataClasses.BallotError: candidate ranked twice in ('a', 'b', 'a')
    """

    def __new__(cls, ranking=()):
        self = super().__new__(cls, ranking)
        if len(set(self)) != len(self):
            raise BallotError("candidate ranked twice in {}".format(tuple(self)))
        return self

    def who_is_first(self, a, b):
        """Returns whichever of a and b this ballot ranks higher.

        The objects handed in are the ones handed back. If the ballot ranks
        neither, the answer is None.

        >>> b = RankedBallot(["x", "y", "z"])
        >>> b.who_is_first("z", "y")
        'y'
        >>> b.who_is_first("x", "z")
        'x'
        >>> b.who_is_first("p", "q") is None
        True
        """
        for cand in self:
            if cand == a:
                return a
            if cand == b:
                return b
        return None

    @property
    def top(self):
        """The most preferred candidate.

        >>> RankedBallot().top
        Traceback (most recent call last):
          ...
        dataClasses.BallotError: empty ballot has no first choice
        """
        if not self:
            raise BallotError("empty ballot has no first choice")
        return self[0]


class WeightedBallot(namedtuple("WeightedBallot", ["weight", "ballot"])):
    """All the voters who cast one identical ranking, as (weight, RankedBallot).

        >>> WeightedBallot(35, ["a", "b", "c"])
        WeightedBallot(weight=35, ballot=('a', 'b', 'c'))
        >>> WeightedBallot(-1, ["a"])
        Traceback (most recent call last):
          ...
        ValueError: ballot weight must be non-negative, got -1
        >>> WeightedBallot(1.5, ["a"])
        Traceback (most recent call last):
          ...
        TypeError: ballot weight must be an integer, got 1.5
    """
    __slots__ = ()

    def __new__(cls, weight, ballot):
        if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
            raise TypeError("ballot weight must be an integer, got {!r}".format(weight))
        if weight < 0:
            raise ValueError("ballot weight must be non-negative, got {}".format(weight))
        return super().__new__(cls, int(weight), RankedBallot(ballot))


##Elections
class Election:
    """A set of candidates plus the weighted ballots cast over them.

    Every ballot is expected to rank every candidate; that is not checked here,
    the methods fail with BallotError when they run into a ballot that can't
    answer their question. An election is never modified after construction.

        >>> e = Election(["a", "b", "c"], [(35, ["a", "b", "c"]), (25, ["b", "c", "a"])])
        >>> e.candidateOrder
        ('a', 'b', 'c')
        >>> e.totalWeight
        60
        >>> e == Election(["c", "b", "a", "a"], [(35, "abc"), (25, "bca")])
        True
        >>> e
        Election(('a', 'b', 'c'), [(35, ('a', 'b', 'c')), (25, ('b', 'c', 'a'))])
    """

    def __init__(self, candidates, ballots=()):
        self.candidateOrder = tuple(dict.fromkeys(candidates))
        self.candidates = frozenset(self.candidateOrder)
        self.ballots = tuple(WeightedBallot(*b) for b in ballots)

    def __eq__(self, other):
        if not isinstance(other, Election):
            return NotImplemented
        return self.candidates == other.candidates and self.ballots == other.ballots

    def __hash__(self):
        return hash((self.candidates, self.ballots))

    def __repr__(self):
        return "{}({}, {})".format(self.__class__.__name__, self.candidateOrder,
                [(w, tuple(b)) for w, b in self.ballots])

    @cached_property
    def totalWeight(self):
        """Number of voters, ie the sum of all ballot weights."""
        return sum(w for w, _ in self.ballots)

    def condorcet_winner(self):
        """The candidate who beats each other candidate by a strict weighted majority, or None.

        >>> Election("ab", [(10, "ab"), (10, "ba")]).condorcet_winner() is None
        True
        """
        from methods import Condorcet
        return Condorcet.winner(self)

    def plurality_winner(self):
        """The candidate with strictly the most first preferences, or None on a tie.

        >>> Election("abc", [(10, "abc"), (10, "bac")]).plurality_winner() is None
        True
        """
        from methods import Plurality
        return Plurality.winner(self)


##Election Methods
class Method:
    """Base class for election methods. Holds some of the duct tape."""

    def __str__(self):
        return self.__class__.__name__

    @classmethod
    def results(cls, election):
        """Combines the ballots of an election into a score per candidate.

        Returns a dict mapping every candidate of the election to a number,
        higher is better.

        Test for subclasses, makes no sense to test this method in the abstract base class.
        """
        raise NotImplementedError("{} needs results".format(cls.__name__))

    @classmethod
    def winner(cls, election):
        """The candidate whose score is strictly the highest, or None.

        Scores are sorted low to high and the two best compared; equal best
        scores mean no winner. A single candidate wins whatever its score.
        Override for methods whose winner isn't simply the top score.
        """
        places = sorted(cls.results(election).items(), key=lambda x: x[1]) #low to high
        if not places:
            return None
        if len(places) == 1:
            return places[0][0]
        (_, secondScore), (top, topScore) = places[-2:]
        if topScore > secondScore:
            return top
        debug(cls.__name__, "tie at", topScore, "between", places[-2][0], "and", top)
        return None
