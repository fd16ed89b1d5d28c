from numpy import sign

from debugDump import *
from dataClasses import *


class Plurality(Method):
    """One-stage plurality: most first preferences wins, a tie for the most elects nobody."""

    @classmethod
    def results(cls, election):
        """First-preference weight of every candidate.

        Candidates nobody ranked first are present with 0.

        >>> e = Election("abc", [(10, "abc"), (10, "bac")])
        >>> Plurality.results(e)
        {'a': 10, 'b': 10, 'c': 0}
        >>> Plurality.winner(e) is None
        True
        >>> Plurality.winner(Election("abc", [(10, "abc"), (9, "bac"), (12, "cab")]))
        'c'
        >>> Plurality.winner(Election("abc", [(1, "abc"), (1, "bac"), (1, "cab")])) is None
        True

        A ballot must name a candidate first:

        >>> Plurality.results(Election("ab", [(3, "xab")]))
        Traceback (most recent call last):
          ...
        dataClasses.BallotError: first choice 'x' is not a candidate
        """
        tally = dict.fromkeys(election.candidateOrder, 0)
        for weight, ballot in election.ballots:
            top = ballot.top
            if top not in tally:
                raise BallotError("first choice {!r} is not a candidate".format(top))
            tally[top] += weight
        return tally


class Condorcet(Method):
    """Elects the candidate who wins every head-to-head matchup by a strict weighted majority.

    There is no cycle resolution: if pairwise majorities are cyclic, or a
    matchup is tied, nobody is elected.
    """

    @staticmethod
    def headToHead(election, a, b):
        """Returns (weight preferring a, weight preferring b) over all the ballots.

        Every ballot has to rank a or b; one ranking neither is a BallotError.

        >>> e = Election("abc", [(35, "abc"), (25, "bca"), (15, "cba")])
        >>> Condorcet.headToHead(e, "a", "b")
        (35, 40)
        >>> Condorcet.headToHead(e, "c", "b")
        (15, 60)
        >>> Condorcet.headToHead(Election("abc", [(1, "abc"), (2, "c")]), "a", "b")
        Traceback (most recent call last):
          ...
        dataClasses.BallotError: ballot ('c',) ranks neither 'a' nor 'b'
        """
        forA = forB = 0
        for weight, ballot in election.ballots:
            first = ballot.who_is_first(a, b)
            if first is None:
                raise BallotError("ballot {} ranks neither {!r} nor {!r}".format(tuple(ballot), a, b))
            if first == a:
                forA += weight
            else:
                forB += weight
        return forA, forB

    @classmethod
    def compMatrix(cls, election):
        """Pairwise margins, in the election's candidateOrder.

        cmat[i][j] is the weight preferring candidate i over candidate j, minus
        the weight preferring j over i.

        >>> Condorcet.compMatrix(Election("abc", [(35, "abc"), (25, "bca"), (15, "cba")]))
        [[0, -5, -5], [5, 0, 45], [5, -45, 0]]
        """
        cands = election.candidateOrder
        n = len(cands)
        cmat = [[0 for i in range(n)] for j in range(n)]
        for i in range(n):
            for j in range(i + 1, n):
                forI, forJ = cls.headToHead(election, cands[i], cands[j])
                cmat[i][j] = forI - forJ
                cmat[j][i] = forJ - forI
        return cmat

    @classmethod
    def results(cls, election):
        """Number of matchups each candidate wins outright.

        >>> Condorcet.results(Election("abc", [(35, "abc"), (25, "bca"), (15, "cba")]))
        {'a': 0, 'b': 2, 'c': 1}
        """
        cmat = cls.compMatrix(election)
        return {cand: int(sum(sign(row) == 1)) for cand, row in zip(election.candidateOrder, cmat)}

    @classmethod
    def winner(cls, election):
        """
        >>> Condorcet.winner(Election("abc", [(35, "abc"), (25, "bca"), (15, "cba")]))
        'b'
        >>> Condorcet.winner(Election("abcd", [(42, "abcd"), (26, "bcda"), (17, "dcba"), (15, "cdba")]))
        'b'

        A cycle (a beats b, b beats c, c beats a) has no winner, and neither
        does a tied matchup:

        >>> Condorcet.winner(Election("abc", [(1, "abc"), (1, "bca"), (1, "cab")])) is None
        True
        >>> Condorcet.winner(Election("ab", [(10, "ab"), (10, "ba")])) is None
        True
        """
        winner = None
        for cand in election.candidates:
            for other in election.candidates - {cand}:
                forCand, forOther = cls.headToHead(election, cand, other)
                if forCand <= forOther:
                    debug(cand, "eliminated by", other, forCand, "to", forOther)
                    break
            else:
                debug(cand, "beats every other candidate")
                winner = cand
        return winner
