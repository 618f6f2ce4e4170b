"""Tests for the database setup and import scripts."""

import importlib.util
import json

import pytest

from puntohogar.core.database import PuntoHogarDatabase


def _load_script(project_root, name):
    spec = importlib.util.spec_from_file_location(name, project_root / 'scripts' / f'{name}.py')
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def init_database(project_root):
    return _load_script(project_root, 'init_database')


@pytest.fixture
def import_script(project_root):
    return _load_script(project_root, 'import_properties')


def test_init_database_seeds(init_database, test_db_path):
    assert init_database.main(['--db', str(test_db_path)]) == 0
    with PuntoHogarDatabase(test_db_path) as db:
        assert db.count_properties() == 14


def test_init_database_without_seed(init_database, test_db_path):
    assert init_database.main(['--db', str(test_db_path), '--no-seed']) == 0
    with PuntoHogarDatabase(test_db_path) as db:
        assert db.count_properties() == 0


def test_import_script(import_script, tmp_path, test_db_path, sample_property):
    export = tmp_path / 'listings.json'
    export.write_text(json.dumps([sample_property]), encoding='utf-8')

    assert import_script.main(['--file', str(export), '--db', str(test_db_path)]) == 0
    with PuntoHogarDatabase(test_db_path) as db:
        assert db.list_properties()[0]['title'] == 'Casa de Campo en Cieneguilla'


def test_import_script_dry_run_and_failures(import_script, tmp_path, test_db_path, sample_property, capsys):
    export = tmp_path / 'listings.json'
    export.write_text(json.dumps([sample_property, {'title': 'Roto'}]), encoding='utf-8')

    assert import_script.main(['--file', str(export), '--db', str(test_db_path), '--dry-run']) == 2
    assert 'row 2' in capsys.readouterr().out
    with PuntoHogarDatabase(test_db_path) as db:
        assert db.count_properties() == 0


def test_import_script_unreadable_file(import_script, tmp_path, test_db_path):
    export = tmp_path / 'listings.json'
    export.write_text('{not json', encoding='utf-8')
    assert import_script.main(['--file', str(export), '--db', str(test_db_path)]) == 1
