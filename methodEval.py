"""Runs the Condorcet and plurality methods side by side over generated elections.

    >>> rows = compareMethods(DeterministicModel(3), 4, 3, 2)
    >>> [(r["condorcetWinner"], r["pluralityWinner"]) for r in rows]
    [(None, 'a'), (None, 'a')]
    >>> summarize(rows)["noWinnerRate"]
    1.0
"""
import multiprocessing

from numpy import mean, nan

from debugDump import *
from methods import *
from voterModels import *
from version import version

resultColumns = ["voterModel", "numVoters", "numCandidates", "numBallots",
        "condorcetWinner", "pluralityWinner", "hasCondorcetWinner", "pluralityTie",
        "agree", "seed", "version"]

def makeResults(**kw):
    results = {c: kw.get(c, None) for c in resultColumns}
    results.update(kw)
    return results

def oneElection(model, nvot, ncand, seed=None):
    """Generates one election with model and records what each method makes of it.

    >>> row = oneElection(DeterministicModel(2), 5, 3)
    >>> row["condorcetWinner"], row["pluralityWinner"], row["pluralityTie"], row["agree"]
    ('a', 'a', False, True)
    >>> oneElection(DeterministicModel(2), 4, 3)["pluralityTie"]
    True
    """
    election = model(nvot, ncand, seed=seed)
    cWinner = election.condorcet_winner()
    pWinner = election.plurality_winner()
    return makeResults(voterModel=str(model), numVoters=election.totalWeight,
            numCandidates=len(election.candidates), numBallots=len(election.ballots),
            condorcetWinner=cWinner, pluralityWinner=pWinner,
            hasCondorcetWinner=cWinner is not None,
            pluralityTie=pWinner is None and len(election.candidates) > 1,
            agree=cWinner is not None and cWinner == pWinner,
            seed=seed, version=version)

def oneStepWorker(model, nvot, ncand, baseSeed=None, i=0):
    if i > 0 and i % 50 == 0:
        debug("Iteration:", i)
    return oneElection(model, nvot, ncand, None if baseSeed is None else baseSeed + i)

def compareMethods(model, nvot, ncand, niter, seed=None, processes=None):
    """Runs niter elections from model through both methods; one result row per election.

    With a seed, election i is generated from seed + i, so the rows don't
    depend on whether a process pool was used.
    """
    args = [(model, nvot, ncand, seed, i) for i in range(niter)]
    if processes:
        with multiprocessing.Pool(processes=processes) as pool:
            rows = pool.starmap(oneStepWorker, args)
    else:
        rows = [oneStepWorker(*a) for a in args]
    debug(str(model), "ran", niter, "elections")
    return rows

def summarize(rows):
    """Rates over a list of result rows.

    agreementRate is how often plurality picked the Condorcet winner, among
    the elections that had one. noWinnerRate counts every election without a
    Condorcet winner, whether from a cycle or from an exactly tied matchup.

    >>> s = summarize([makeResults(hasCondorcetWinner=True, agree=True, pluralityTie=False),
    ...                makeResults(hasCondorcetWinner=True, agree=False, pluralityTie=True),
    ...                makeResults(hasCondorcetWinner=False, agree=False, pluralityTie=False)])
    >>> s["niter"], s["agreementRate"], s["pluralityTieRate"]
    (3, 0.5, 0.3333333333333333)
    """
    hasWinner = [r["hasCondorcetWinner"] for r in rows]
    condorcetRate = float(mean(hasWinner)) if rows else nan
    withWinner = [r["agree"] for r in rows if r["hasCondorcetWinner"]]
    return dict(
        niter=len(rows),
        condorcetRate=condorcetRate,
        noWinnerRate=1 - condorcetRate,
        pluralityTieRate=float(mean([r["pluralityTie"] for r in rows])) if rows else nan,
        agreementRate=float(mean(withWinner)) if withWinner else nan,
    )
