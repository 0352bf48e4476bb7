"""Attacker client and experiment scripts, with the oracle served in-process."""

from unittest.mock import patch

import matplotlib
matplotlib.use('Agg')

import pandas as pd  # noqa: E402

from attacker import recover as attacker  # noqa: E402
from experiments import plot_heatmap, run_experiments  # noqa: E402
from splitmix.app import create_app  # noqa: E402
from splitmix.smgen import mk_smgen, seed_smgen  # noqa: E402


class FakeResponse:

    def __init__(self, resp):
        self._resp = resp

    def json(self):
        return self._resp.get_json()

    def raise_for_status(self):
        assert self._resp.status_code == 200


def routed(client):
    """requests.get/post replacements that hit the Flask test client."""
    def get(url, timeout=None):
        return FakeResponse(client.get(url.replace(attacker.ORACLE, '')))

    def post(url, json=None, timeout=None):
        return FakeResponse(client.post(url.replace(attacker.ORACLE, ''), json=json))

    return get, post


class TestAttacker:

    def test_query_oracle(self):
        client = create_app(seed_smgen(0, 1)).test_client()
        get, _ = routed(client)
        with patch.object(attacker.requests, 'get', get):
            assert attacker.query_oracle(2) == [0xb63e102af05e81a9, 0x75d159eeec6bbf8f]

    def test_main_predicts_and_validates(self, capsys):
        client = create_app(mk_smgen(31337)).test_client()
        get, post = routed(client)
        with patch.object(attacker.requests, 'get', get), \
                patch.object(attacker.requests, 'post', post), \
                patch('sys.argv', ['recover.py', '--samples', '3']):
            attacker.main()
        out = capsys.readouterr().out
        assert 'Recovered state' in out
        assert "'ok': True" in out


class TestExperiments:

    def test_oracle_rows(self):
        client = create_app(mk_smgen(5)).test_client()
        get, _ = routed(client)
        with patch.object(run_experiments.requests, 'get', get):
            rows = run_experiments.oracle_rows(attacker.ORACLE, depth=2, n=200)
        assert len(rows) == 128
        assert {r['depth'] for r in rows} == {0, 1}

    def test_pivot_and_plot(self, tmp_path):
        df = pd.DataFrame([
            {'seed': s, 'depth': d, 'bit': b, 'ones_fraction': 0.5 + 0.01 * s}
            for s in (0, 1) for d in range(3) for b in range(64)
        ])
        pivot = plot_heatmap.prepare_pivot(df)
        assert pivot.shape == (64, 3)
        assert pivot.index[0] == 63
        assert abs(pivot.loc[0, 0] - 0.505) < 1e-12
        out = tmp_path / 'heatmap.png'
        plot_heatmap.plot_heatmap(pivot, out_file=str(out), show=False)
        assert out.exists()
