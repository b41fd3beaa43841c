from src.adapters.sqlite.repos import SQLitePortRepo, SQLiteTerminalRepo
from src.app_shell.cli import main
from src.app_shell.seed import seed_demo_data


def test_seed_inserts_demo_ports(db_path, clock):
    ports = SQLitePortRepo(db_path)
    terminals = SQLiteTerminalRepo(db_path)

    created = seed_demo_data(ports, terminals, clock)

    assert created == 2
    assert [(p.code, p.name) for p in ports.list_all()] == [
        ("ABCDE", "Port A"),
        ("FGHIJ", "Port B"),
    ]
    t1, t2 = terminals.list_all()
    assert (t1.name, t1.port_id, t1.latitude, t1.longitude) == ("Terminal 1", 1, 40.7128, -74.006)
    assert (t2.name, t2.port_id, t2.latitude, t2.longitude) == (
        "Terminal 2",
        2,
        34.0522,
        -118.2437,
    )
    assert t1.is_active and t2.is_active


def test_seed_skips_when_ports_exist(db_path, clock):
    ports = SQLitePortRepo(db_path)
    terminals = SQLiteTerminalRepo(db_path)
    seed_demo_data(ports, terminals, clock)

    assert seed_demo_data(ports, terminals, clock) == 0
    assert len(ports.list_all()) == 2


def test_cli_seed_migrates_and_seeds(tmp_path, migrations_dir, monkeypatch, capsys):
    db_path = str(tmp_path / "cli.db")
    monkeypatch.setenv("MARITIME_DB_PATH", db_path)
    monkeypatch.setenv("MARITIME_MIGRATIONS_DIR", migrations_dir)

    main(["--config", str(tmp_path / "absent.yaml"), "seed"])

    out = capsys.readouterr().out
    assert "Applied 1 migration(s)" in out
    assert "Seeded 2 port(s)." in out
    assert len(SQLitePortRepo(db_path).list_all()) == 2
