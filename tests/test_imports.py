def test_import_herbmarket_package() -> None:
    import importlib

    module = importlib.import_module("herbmarket")
    assert module is not None


def test_import_rng_no_side_effects() -> None:
    from herbmarket.core.rng import RNG

    rng = RNG(42)
    value = rng.randint(0, 1)
    assert value in (0, 1)


def test_import_cli_app_no_side_effects(capsys) -> None:
    from herbmarket.presentation.cli import app

    assert callable(app.main)
    assert capsys.readouterr().out == ""
