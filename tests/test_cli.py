import numpy as np
from PIL import Image

from complexmath.cli import main


def test_render_shader_png(tmp_path):
    out = tmp_path / "figures" / "roots.png"
    code = main([
        "--shader", "root", "--param", "n=5", "--param", "k=1",
        "--width", "16", "--height", "12",
        "--outfile", str(out),
    ])
    assert code == 0
    assert out.exists()
    img = np.asarray(Image.open(out))
    assert img.shape == (12, 16, 3)


def test_render_cpow_with_i_suffix(tmp_path):
    out = tmp_path / "cpow.png"
    code = main([
        "--shader", "cpow", "--param", "w=1+2i",
        "--width", "6", "--height", "4",
        "--outfile", str(out),
    ])
    assert code == 0
    assert Image.open(out).size == (6, 4)


def test_render_map_from_config(tmp_path):
    cfg = tmp_path / "julia.yaml"
    cfg.write_text("map: quadratic\nc: '-0.8+0.156j'\nmax_iter: 20\ncolor_mode: iters\n")
    out = tmp_path / "julia.png"
    code = main(["--config", str(cfg), "--width", "10", "--height", "10", "--outfile", str(out)])
    assert code == 0
    assert Image.open(out).size == (10, 10)


def test_missing_config(tmp_path, capsys):
    code = main(["--config", str(tmp_path / "missing.yaml"), "--outfile", str(tmp_path / "x.png")])
    assert code == 1
    assert "Error: Config file not found" in capsys.readouterr().out
