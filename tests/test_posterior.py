import numpy as np
import pytest

from quattro import (
    Chain,
    InvalidConfig,
    MCMCState,
    PosteriorSummarizer,
    ThetaVector,
    describe,
    summarize,
    summarize_sigma,
)


@pytest.fixture
def ramp_chain() -> Chain:
    """10,000 states with theta0 = i, theta1 = 2i, so any mean pins down the rows used."""
    chain = Chain()
    for i in range(10_000):
        chain.append(MCMCState(float(i), 2.0 * i, 1.0 + (i % 2)), accepted=True)
    return chain


def test_burn_in_drops_exactly_the_prefix(ramp_chain):
    theta = summarize(ramp_chain, burn_in=1000)
    # mean of 1000..9999, i.e. exactly 9,000 entries
    assert theta == ThetaVector(5499.5, 10999.0)


def test_no_burn_in_uses_everything(ramp_chain):
    theta = summarize(ramp_chain, burn_in=0)
    assert theta.theta0 == pytest.approx(4999.5)
    assert theta.theta1 == pytest.approx(9999.0)


def test_last_entry_only(ramp_chain):
    assert summarize(ramp_chain, burn_in=9999) == ThetaVector(9999.0, 19998.0)


@pytest.mark.parametrize("burn_in", [10_000, 10_001, -1, 2.5])
def test_invalid_burn_in(ramp_chain, burn_in):
    with pytest.raises(InvalidConfig):
        summarize(ramp_chain, burn_in=burn_in)


def test_empty_chain_has_nothing_to_summarize():
    with pytest.raises(InvalidConfig):
        summarize(Chain(), burn_in=0)


def test_repeated_states_weight_the_mean():
    chain = Chain()
    chain.append(MCMCState(1.0, 1.0, 1.0), accepted=True)
    chain.append(MCMCState(1.0, 1.0, 1.0), accepted=False)
    chain.append(MCMCState(1.0, 1.0, 1.0), accepted=False)
    chain.append(MCMCState(5.0, 9.0, 1.0), accepted=True)
    assert summarize(chain, burn_in=0) == ThetaVector(2.0, 3.0)


def test_sigma_summary(ramp_chain):
    assert summarize_sigma(ramp_chain, burn_in=1000) == pytest.approx(1.5)


def test_describe(ramp_chain):
    table = describe(ramp_chain, burn_in=1000)
    assert list(table.index) == ["theta0", "theta1", "sigma"]
    assert list(table.columns) == ["mean", "std", "q2.5", "q97.5"]
    assert table.loc["theta0", "mean"] == pytest.approx(5499.5)
    assert table.loc["theta1", "q2.5"] < table.loc["theta1", "mean"] < table.loc["theta1", "q97.5"]
    assert table.loc["sigma", "std"] == pytest.approx(np.std([1.0, 2.0] * 4500, ddof=1))


def test_summarizer_object(ramp_chain):
    summarizer = PosteriorSummarizer(burn_in=1000)
    assert summarizer.summarize(ramp_chain) == summarize(ramp_chain, 1000)
    assert summarizer.describe(ramp_chain).shape == (3, 4)
    with pytest.raises(InvalidConfig):
        PosteriorSummarizer(burn_in=-5)
    with pytest.raises(InvalidConfig):
        PosteriorSummarizer(burn_in=10_000).summarize(ramp_chain)
