"""
Tests for the batch report, its figures and the command-line runner.
"""

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest
import yaml

from prime_kernel import runtime
from prime_kernel.cli import main
from prime_kernel.config import DEFAULTS
from prime_kernel.counting import prime_counting
from prime_kernel.gaps import prime_gaps, gap_histogram
from prime_kernel.plotting import (
    plot_prime_gaps,
    plot_prime_counting,
    plot_ulam_spiral,
    plot_sacks_spiral,
)
from prime_kernel.primes import first_n_primes, sieve_of_eratosthenes
from prime_kernel.layouts import ulam_coordinates, sacks_coordinates
from prime_kernel import report as report_module
from prime_kernel.report import (
    numbers_with_prime_flags,
    factorization_table,
    run_prime_report,
)

REPORT_FILES = [
    'primes.csv',
    'prime_counting.csv',
    'gaps.csv',
    'gap_histogram.csv',
    'factorizations.csv',
    'summary.csv',
]


@pytest.fixture
def small_config():
    config = dict(DEFAULTS)
    config.update({
        'limit': 100,
        'n_primes': 25,
        'factor_samples': [1, 360, 4294967295],
        'sample_size': 5,
        'figures': False,
    })
    return config


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


class TestNumbersWithPrimeFlags:

    def test_upto_10(self):
        df = numbers_with_prime_flags(10)
        assert df['number'].tolist() == list(range(1, 11))
        assert df.loc[df['is_prime'], 'number'].tolist() == [2, 3, 5, 7]

    def test_zero_is_empty(self):
        df = numbers_with_prime_flags(0)
        assert len(df) == 0
        assert list(df.columns) == ['number', 'is_prime']


class TestFactorizationTable:

    def test_rows(self):
        df = factorization_table([1, 360, 17])
        assert df['factors'].tolist() == ['', '2 2 2 3 3 5', '17']
        assert df['omega'].tolist() == [0, 3, 1]
        assert df['big_omega'].tolist() == [0, 6, 1]
        assert df['is_prime'].tolist() == [False, False, True]
        assert df['product_ok'].all()


class TestRunPrimeReport:

    def test_writes_all_tables(self, small_config, tmp_path):
        run_prime_report(small_config, tmp_path, verbose=False)
        for name in REPORT_FILES:
            assert (tmp_path / name).exists(), f"missing {name}"

    def test_summary_values(self, small_config, tmp_path):
        df = run_prime_report(small_config, tmp_path, verbose=False)['summary']
        summary = df.set_index('metric')['value']

        assert summary['primes_upto_limit'] == 25
        assert summary['pi_limit'] == 25
        assert summary['n_primes'] == 25
        assert summary['largest_of_first_n'] == 97
        assert summary['gap_max'] == 8
        assert summary['twin_gaps'] == 8
        assert summary['cousin_gaps'] == 7
        assert summary['sexy_gaps'] == 7
        assert summary['factorizations'] == 8
        assert summary['factorizations_ok'] == 8

    def test_tables_content(self, small_config, tmp_path):
        run_prime_report(small_config, tmp_path, verbose=False)

        counts = pd.read_csv(tmp_path / 'prime_counting.csv')
        assert len(counts) == 101
        assert counts['pi'].iloc[10] == 4

        gaps = pd.read_csv(tmp_path / 'gaps.csv')
        assert len(gaps) == 24
        assert (gaps['next_p'] - gaps['p'] == gaps['gap']).all()

        hist = pd.read_csv(tmp_path / 'gap_histogram.csv')
        assert hist['count'].sum() == 24

    def test_same_seed_same_samples(self, small_config, tmp_path):
        run_prime_report(small_config, tmp_path / 'a', verbose=False)
        run_prime_report(small_config, tmp_path / 'b', verbose=False)
        a = pd.read_csv(tmp_path / 'a' / 'factorizations.csv')
        b = pd.read_csv(tmp_path / 'b' / 'factorizations.csv')
        assert a.equals(b)

    def test_zero_primes(self, small_config, tmp_path):
        small_config.update({'limit': 0, 'n_primes': 0})
        df = run_prime_report(small_config, tmp_path, verbose=False)['summary']
        summary = df.set_index('metric')['value']
        assert summary['primes_upto_limit'] == 0
        assert summary['twin_gaps'] == 0

    def test_returns_arrays_for_plotting(self, small_config, tmp_path):
        results = run_prime_report(small_config, tmp_path, verbose=False)

        assert results['primes'].tolist() == sieve_of_eratosthenes(100).tolist()
        assert len(results['is_prime']) == 101
        assert results['is_prime'].nonzero()[0].tolist() == results['primes'].tolist()
        assert results['counts'].tolist() == prime_counting(100).tolist()
        assert len(results['first_primes']) == 25
        assert results['gaps'].tolist() == prime_gaps(results['first_primes']).tolist()
        assert results['histogram'] == gap_histogram(results['gaps'])

    def test_verbose_prints_progress(self, small_config, tmp_path, capsys):
        run_prime_report(small_config, tmp_path)
        out = capsys.readouterr().out
        assert "Running prime report" in out
        assert "Results saved" in out


class TestPlotting:

    def test_gap_plot_saved(self, tmp_path):
        primes = first_n_primes(200)
        gaps = prime_gaps(primes)
        path = tmp_path / 'gaps.png'
        fig = plot_prime_gaps(primes, gaps, gap_histogram(gaps), path)
        assert path.exists()
        assert len(fig.axes) == 2

    def test_gap_plot_without_gaps(self):
        primes = first_n_primes(1)
        gaps = prime_gaps(primes)
        fig = plot_prime_gaps(primes, gaps, gap_histogram(gaps))
        assert len(fig.axes) == 2

    def test_counting_plot_saved(self, tmp_path):
        path = tmp_path / 'pi.png'
        plot_prime_counting(prime_counting(500), path)
        assert path.exists()

    def test_ulam_plot_saved(self, tmp_path):
        x, y = ulam_coordinates(400)
        flags = np.zeros(400, dtype=bool)
        flags[sieve_of_eratosthenes(400).astype(np.int64) - 1] = True
        path = tmp_path / 'ulam.png'
        fig = plot_ulam_spiral(x, y, flags, path)
        assert path.exists()
        assert len(fig.axes) == 1

    def test_sacks_plot_saved(self, tmp_path):
        x, y = sacks_coordinates(sieve_of_eratosthenes(2000))
        path = tmp_path / 'sacks.png'
        plot_sacks_spiral(x, y, path)
        assert path.exists()


class TestCli:

    @pytest.fixture(autouse=True)
    def skip_fault_handler(self, monkeypatch):
        monkeypatch.setattr(runtime, '_initialized', True)

    def write_config(self, tmp_path, **overrides):
        data = {'limit': 200, 'n_primes': 50, 'sample_size': 3}
        data.update(overrides)
        path = tmp_path / 'config.yaml'
        with open(path, 'w') as f:
            yaml.safe_dump(data, f)
        return path

    def test_full_run(self, tmp_path, capsys):
        config = self.write_config(tmp_path)
        out_dir = tmp_path / 'out'

        assert main(['--config', str(config), '--output-dir', str(out_dir)]) == 0

        for name in REPORT_FILES:
            assert (out_dir / name).exists()
        assert (out_dir / 'figures' / 'prime_gaps.png').exists()
        assert (out_dir / 'figures' / 'prime_counting.png').exists()
        assert (out_dir / 'figures' / 'ulam_spiral.png').exists()
        assert (out_dir / 'figures' / 'sacks_spiral.png').exists()
        assert "KEY RESULTS" in capsys.readouterr().out

    def test_figures_reuse_report_arrays(self, tmp_path, monkeypatch):
        """Figures are drawn from the report's arrays; nothing is sieved twice."""
        calls = {'first_n_primes': 0, 'prime_counting': 0}

        def counted(name, func):
            def wrapper(*args, **kwargs):
                calls[name] += 1
                return func(*args, **kwargs)
            return wrapper

        for name in calls:
            monkeypatch.setattr(report_module, name,
                                counted(name, getattr(report_module, name)))

        config = self.write_config(tmp_path)
        main(['--config', str(config), '--output-dir', str(tmp_path / 'out')])

        assert calls == {'first_n_primes': 1, 'prime_counting': 1}
        assert (tmp_path / 'out' / 'figures' / 'prime_gaps.png').exists()

    def test_no_figures(self, tmp_path):
        config = self.write_config(tmp_path)
        out_dir = tmp_path / 'out'

        main(['--config', str(config), '--output-dir', str(out_dir), '--no-figures'])

        assert (out_dir / 'summary.csv').exists()
        assert not (out_dir / 'figures').exists()

    def test_output_dir_from_config(self, tmp_path):
        out_dir = tmp_path / 'from_config'
        config = self.write_config(tmp_path, output_dir=str(out_dir), figures=False)

        main(['--config', str(config)])

        assert (out_dir / 'summary.csv').exists()

    def test_bad_config_raises(self, tmp_path):
        config = self.write_config(tmp_path, limit=-1)
        with pytest.raises(ValueError):
            main(['--config', str(config)])


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
