import io
import pytest

from dcb.colorings import ArrayColoring, MirrorColoring, generate_bfs
from dcb.graph import attach_colors, cross_check, hypercube_graph, is_perfect_coloring
from dcb.validate import neighborhood_colors, validate


def _run(coloring, ndim):
    buf = io.StringIO()
    result = validate(coloring, ndim, out=buf)
    return result, buf.getvalue()


class TestBFSBaseline:
    def test_square_is_perfect(self):
        result, text = _run(generate_bfs(2), 2)
        assert result
        assert text == ""

    def test_cube_fails_at_vertex_one(self):
        result, text = _run(generate_bfs(3), 3)
        assert not result
        assert (result.vertex, result.count, result.colors_seen) == (1, 2, 0b101)
        assert text == "For state 001, saw 2 (101) colors, expected 3\n"

    def test_tesseract_fails_at_vertex_two(self):
        result, text = _run(generate_bfs(4), 4)
        assert not result
        assert (result.vertex, result.count, result.colors_seen) == (2, 3, 0b1101)
        assert text == "For state 0010, saw 3 (1101) colors, expected 4\n"

    @pytest.mark.parametrize("ndim", [2, 3, 4, 5])
    def test_agrees_with_graph_view(self, ndim):
        coloring = generate_bfs(ndim)
        result, _ = _run(coloring, ndim)
        assert cross_check(coloring, ndim) == result.ok


class TestMirrorBaseline:
    @pytest.mark.parametrize("ndim,ok", [(2, True), (3, False), (4, True)])
    def test_small(self, ndim, ok):
        result, _ = _run(MirrorColoring(ndim), ndim)
        assert result.ok is ok

    def test_cube_failure(self):
        result, text = _run(MirrorColoring(3), 3)
        assert text == "For state 010, saw 2 (101) colors, expected 3\n"

    def test_sixteen_fails_at_origin(self):
        # bits 5.. shift the id by multiples of the period 32, so only 5 neighbors add colors
        result, text = _run(MirrorColoring(16), 16)
        assert not result
        assert result.vertex == 0
        assert result.count == 6
        assert result.colors_seen == (1 << 0) | (1 << 1) | (1 << 2) | (1 << 4) | (1 << 8) | (1 << 15)
        assert text == "For state 0000000000000000, saw 6 (1000000100010111) colors, expected 16\n"


def test_neighborhood_mask():
    coloring = ArrayColoring([0, 1, 1, 0], 2)
    assert neighborhood_colors(coloring, 0, 2) == 0b11
    assert neighborhood_colors(ArrayColoring([0, 0, 0, 0], 2), 3, 2) == 0b1


def test_neighborhood_mask_matches_flipped_bits():
    coloring = generate_bfs(5)
    for v in range(32):
        want = 1 << coloring[v]
        for i in range(5):
            want |= 1 << coloring[v ^ (1 << i)]
        assert neighborhood_colors(coloring, v, 5) == want


def test_constant_coloring_fails_first_vertex():
    result, _ = _run(ArrayColoring([1] * 8, 3), 3)
    assert not result
    assert result.vertex == 0
    assert result.colors_seen == 0b010


def test_validator_does_not_mutate():
    coloring = generate_bfs(4)
    before = coloring.tolist()
    _run(coloring, 4)
    assert coloring.tolist() == before


def test_progress_bar_goes_to_stderr(capsys):
    result = validate(MirrorColoring(4), 4, progress=True)
    captured = capsys.readouterr()
    assert result
    assert captured.out == ""


def test_success_description():
    result, _ = _run(MirrorColoring(2), 2)
    assert result.describe() == "all 4 neighborhoods see 2 colors"


class TestGraphView:
    @pytest.mark.parametrize("ndim", [1, 2, 3, 4])
    def test_ids_match_bit_flips(self, ndim):
        g = hypercube_graph(ndim)
        assert sorted(g.nodes()) == list(range(1 << ndim))
        for v in g.nodes():
            assert sorted(g.neighbors(v)) == sorted(v ^ (1 << i) for i in range(ndim))

    def test_perfect_coloring(self):
        assert is_perfect_coloring(attach_colors(hypercube_graph(2), MirrorColoring(2)), 2)
        assert not is_perfect_coloring(attach_colors(hypercube_graph(2), ArrayColoring([0, 0, 0, 0], 2)), 2)

    def test_attach_colors(self):
        g = attach_colors(hypercube_graph(3), generate_bfs(3))
        assert [g.nodes[v]["color"] for v in range(8)] == [0, 0, 2, 0, 1, 2, 1, 1]

    def test_cross_check_skips_large(self):
        assert cross_check(MirrorColoring(16), 16) is None
