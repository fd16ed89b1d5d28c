import unittest
import doctest
import itertools
import math
import dataClasses, methods, voterModels, methodEval, mydecorators, debugDump

from debugDump import *
from dataClasses import BallotError, Election, RankedBallot, WeightedBallot
from methods import Condorcet, Plurality
from voterModels import RandomModel, DeterministicModel, PolyaModel, DirichletModel, candidateNames
from methodEval import compareMethods, oneElection, summarize

setDebug(False)

def load_tests(loader, tests, ignore):

    setDebug(False)
    tests.addTests(doctest.DocTestSuite(dataClasses))
    tests.addTests(doctest.DocTestSuite(methods))
    tests.addTests(doctest.DocTestSuite(voterModels))
    tests.addTests(doctest.DocTestSuite(methodEval))
    tests.addTests(doctest.DocTestSuite(mydecorators))
    tests.addTests(doctest.DocTestSuite(debugDump))
    return tests


def scenarioA():
    return Election({"a", "b", "c"}, [(35, "abc"), (25, "bca"), (15, "cba")])

def scenarioB():
    return Election({"a", "b", "c", "d"},
            [(42, "abcd"), (26, "bcda"), (17, "dcba"), (15, "cdba")])

def scenarioC():
    return Election({"a", "b"}, [(10, "ab"), (10, "ba")])

def scenarioD():
    return Election({"a", "b", "c"}, [(10, "abc"), (10, "bac")])

def cycle():
    return Election({"a", "b", "c"}, [(4, "abc"), (3, "bca"), (2, "cab")])


class TestScenarios(unittest.TestCase):

    def test_scenario_a(self):
        self.assertEqual(scenarioA().condorcet_winner(), "b")

    def test_scenario_b(self):
        self.assertEqual(scenarioB().condorcet_winner(), "b")

    def test_scenario_c_tied_matchup(self):
        self.assertIsNone(scenarioC().condorcet_winner())

    def test_scenario_d_plurality_tie(self):
        e = scenarioD()
        self.assertIsNone(e.plurality_winner())
        self.assertEqual(Plurality.results(e), {"a": 10, "b": 10, "c": 0})

    def test_scenario_a_plurality(self):
        self.assertEqual(scenarioA().plurality_winner(), "a")


class TestCondorcet(unittest.TestCase):

    def test_paradox(self):
        e = cycle()
        self.assertIsNone(e.condorcet_winner())
        # every candidate loses exactly one matchup
        self.assertEqual(sorted(Condorcet.results(e).values()), [1, 1, 1])

    def test_majority_property(self):
        for e in [scenarioA(), scenarioB()] + [PolyaModel()(60, 4, seed=s) for s in range(20)]:
            winner = e.condorcet_winner()
            if winner is None:
                continue
            for other in e.candidates - {winner}:
                forWinner, forOther = Condorcet.headToHead(e, winner, other)
                self.assertGreater(forWinner, forOther)

    def test_uniqueness(self):
        for s in range(20):
            e = PolyaModel()(60, 4, seed=s)
            beatsAll = [c for c, wins in Condorcet.results(e).items()
                        if wins == len(e.candidates) - 1]
            self.assertLessEqual(len(beatsAll), 1)
            self.assertEqual(e.condorcet_winner(), beatsAll[0] if beatsAll else None)

    def test_independent_of_candidate_order(self):
        # the hash fixes where a candidate falls in set iteration
        class Placed(str):
            def __new__(cls, name, place):
                self = super().__new__(cls, name)
                self.place = place
                return self
            def __hash__(self):
                return self.place

        seen = set()
        for order in itertools.permutations("abcd"):
            cand = {name: Placed(name, i) for i, name in enumerate(order)}
            placed = lambda ballots: [(w, [cand[c] for c in r]) for w, r in ballots]
            e = Election(cand.values(), placed([(42, "abcd"), (26, "bcda"), (17, "dcba"), (15, "cdba")]))
            seen.add(tuple(str(c) for c in e.candidates))
            self.assertIs(e.condorcet_winner(), cand["b"])
            self.assertEqual(e.plurality_winner(), "a")
            e = Election(cand.values(), placed([(4, "abcd"), (3, "bcad"), (2, "cabd")]))
            self.assertIsNone(e.condorcet_winner())
        self.assertEqual(len(seen), 24)

    def test_returns_callers_candidate(self):
        a, b = ("a",), ("b",)
        e = Election([a, b], [(3, [("a",), ("b",)]), (1, [b, a])])
        self.assertIs(e.condorcet_winner(), a)

    def test_zero_weight_ballot_counts_for_nothing(self):
        e = Election("ab", [(5, "ab"), (0, "ba"), (4, "ba")])
        self.assertEqual(Condorcet.headToHead(e, "a", "b"), (5, 4))
        self.assertEqual(e.condorcet_winner(), "a")

    def test_ballot_ranking_neither_fails(self):
        e = Election("abc", [(5, "abc"), (2, "c")])
        with self.assertRaises(BallotError):
            e.condorcet_winner()

    def test_comp_matrix_antisymmetric(self):
        cmat = Condorcet.compMatrix(scenarioB())
        for i, row in enumerate(cmat):
            self.assertEqual(row[i], 0)
            for j, margin in enumerate(row):
                self.assertEqual(margin, -cmat[j][i])


class TestPlurality(unittest.TestCase):

    def test_tie_above_lower_third(self):
        e = Election("abc", [(10, "abc"), (10, "bca"), (3, "cab")])
        self.assertIsNone(e.plurality_winner())

    def test_lower_tie_does_not_matter(self):
        e = Election("abcd", [(10, "abcd"), (3, "bcda"), (3, "cdab")])
        self.assertEqual(e.plurality_winner(), "a")

    def test_lone_first_choice_wins(self):
        e = Election("abc", [(7, "abc"), (2, "acb")])
        self.assertEqual(e.plurality_winner(), "a")

    def test_unknown_first_choice_fails(self):
        with self.assertRaises(BallotError):
            Election("ab", [(1, "zab")]).plurality_winner()

    def test_empty_ranking_fails(self):
        with self.assertRaises(BallotError):
            Election("ab", [(1, [])]).plurality_winner()


class TestDegenerateElections(unittest.TestCase):

    def test_no_candidates(self):
        e = Election([], [])
        self.assertIsNone(e.condorcet_winner())
        self.assertIsNone(e.plurality_winner())

    def test_single_candidate(self):
        e = Election(["a"], [(3, "a")])
        self.assertEqual(e.condorcet_winner(), "a")
        self.assertEqual(e.plurality_winner(), "a")
        self.assertEqual(Election(["a"]).plurality_winner(), "a")

    def test_no_ballots(self):
        e = Election("abc")
        self.assertIsNone(e.condorcet_winner())
        self.assertIsNone(e.plurality_winner())

    def test_only_zero_weights(self):
        e = Election("ab", [(0, "ab")])
        self.assertIsNone(e.condorcet_winner())
        self.assertIsNone(e.plurality_winner())


class TestData(unittest.TestCase):

    def test_who_is_first(self):
        b = RankedBallot(["a", "b", "c"])
        self.assertEqual(b.who_is_first("c", "a"), "a")
        self.assertEqual(b.who_is_first("b", "c"), "b")
        self.assertIsNone(b.who_is_first("x", "y"))

    def test_duplicate_candidate(self):
        with self.assertRaises(BallotError):
            RankedBallot("aba")

    def test_weights(self):
        with self.assertRaises(ValueError):
            WeightedBallot(-3, "ab")
        with self.assertRaises(TypeError):
            WeightedBallot(True, "ab")
        with self.assertRaises(TypeError):
            WeightedBallot("3", "ab")
        self.assertEqual(WeightedBallot(0, "ab").weight, 0)

    def test_election_value_semantics(self):
        self.assertEqual(scenarioA(), Election("cab", [(35, "abc"), (25, "bca"), (15, "cba")]))
        self.assertNotEqual(scenarioA(), Election("abc", [(35, "abc"), (15, "cba"), (25, "bca")]))
        self.assertEqual(len({scenarioA(), scenarioA()}), 1)
        self.assertEqual(len(Election("aab").candidates), 2)

    def test_determinism(self):
        for make in [scenarioA, scenarioB, scenarioC, scenarioD, cycle]:
            e = make()
            self.assertEqual({e.condorcet_winner() for i in range(5)}, {make().condorcet_winner()})
            self.assertEqual({e.plurality_winner() for i in range(5)}, {make().plurality_winner()})


class TestVoterModels(unittest.TestCase):

    models = [RandomModel(), DeterministicModel(3), PolyaModel(), DirichletModel(4, 0.7)]

    def test_complete_ballots(self):
        for model in self.models:
            e = model(40, 5, seed=11)
            self.assertEqual(e.totalWeight, 40, str(model))
            self.assertEqual(e.candidateOrder, tuple(candidateNames(5)))
            for weight, ballot in e.ballots:
                self.assertGreater(weight, 0)
                self.assertEqual(sorted(ballot), candidateNames(5))

    def test_winner_membership(self):
        for model in self.models:
            for s in range(10):
                e = model(30, 4, seed=s)
                for winner in (e.condorcet_winner(), e.plurality_winner()):
                    if winner is not None:
                        self.assertIn(winner, e.candidates)

    def test_polya_fractional_alpha(self):
        for alpha in [0, 0.25, 0.5, 2.5]:
            e = PolyaModel(seedVoters=2, alpha=alpha)(20, 3, seed=1)
            self.assertEqual(e.totalWeight, 20)
            for weight, ballot in e.ballots:
                self.assertEqual(sorted(ballot), candidateNames(3))
        self.assertLessEqual(len(PolyaModel(alpha=0)(30, 4, seed=2).ballots), 2)
        with self.assertRaises(ValueError):
            PolyaModel(alpha=-0.5)

    def test_polya_seed_repeats_and_varies(self):
        model = PolyaModel(seedVoters=1, alpha=3.5)
        self.assertEqual(model(40, 4, seed=9), model(40, 4, seed=9))
        self.assertGreater(len({model(40, 4, seed=s) for s in range(5)}), 1)

    def test_constructor_arguments_assigned(self):
        self.assertEqual(DeterministicModel(3).modulo, 3)
        polya = PolyaModel(alpha=0.5)
        self.assertEqual((polya.seedVoters, polya.alpha), (2, 0.5))
        bloc = DirichletModel(4)
        self.assertEqual((bloc.nblocs, bloc.alpha), (4, 1.0))

    def test_seeded_models_repeat(self):
        for model in [RandomModel(), PolyaModel(), DirichletModel()]:
            self.assertEqual(model(25, 3, seed=5), model(25, 3, seed=5))


class TestMethodEval(unittest.TestCase):

    def test_rows(self):
        rows = compareMethods(PolyaModel(), 50, 4, 12, seed=100)
        self.assertEqual(len(rows), 12)
        self.assertEqual([r["seed"] for r in rows], list(range(100, 112)))
        for r in rows:
            self.assertEqual(r["numVoters"], 50)
            if r["agree"]:
                self.assertEqual(r["condorcetWinner"], r["pluralityWinner"])

    def test_repeatable_with_seed(self):
        self.assertEqual(compareMethods(RandomModel(), 21, 3, 5, seed=1),
                         compareMethods(RandomModel(), 21, 3, 5, seed=1))

    def test_summary(self):
        s = summarize(compareMethods(DeterministicModel(2), 5, 3, 4))
        self.assertEqual(s["niter"], 4)
        self.assertEqual(s["condorcetRate"], 1.0)
        self.assertEqual(s["agreementRate"], 1.0)
        self.assertTrue(math.isnan(summarize([])["agreementRate"]))

    def test_no_winner_rate_counts_tied_matchups(self):
        e = DeterministicModel(3)(4, 3)
        # a and c split 2-2, no cycle
        self.assertEqual(Condorcet.headToHead(e, "a", "c"), (2, 2))
        s = summarize(compareMethods(DeterministicModel(3), 4, 3, 3))
        self.assertEqual(s["noWinnerRate"], 1.0)
        self.assertEqual(s["condorcetRate"], 0.0)
        self.assertNotIn("paradoxRate", s)

    def test_majority_bloc_agrees(self):
        # with two blocs and an odd electorate one bloc is a strict majority
        for s in range(10):
            row = oneElection(DirichletModel(2), 9, 3, seed=s)
            self.assertTrue(row["agree"], row)
            self.assertLessEqual(row["numBallots"], 2)


if __name__ == "__main__":
    unittest.main()
