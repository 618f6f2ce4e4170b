"""Tests for the /api/properties endpoints."""

import pytest

from puntohogar.core.database import PuntoHogarDatabase


def _titles(response):
    return [p['title'] for p in response.get_json()]


class TestListEndpoint:

    def test_returns_full_catalog(self, client):
        response = client.get('/api/properties')
        assert response.status_code == 200
        assert response.is_json
        assert len(response.get_json()) == 14

    def test_filter_by_type(self, client):
        response = client.get('/api/properties?type=sale')
        assert response.status_code == 200
        assert all(p['type'] == 'sale' for p in response.get_json())
        assert 'Casa Familiar en La Molina' in _titles(response)
        assert 'Estudio Luminoso en Barranco' not in _titles(response)

    def test_spanish_type_alias(self, client):
        assert _titles(client.get('/api/properties?type=venta')) == \
            _titles(client.get('/api/properties?type=sale'))

    def test_filter_by_category(self, client):
        response = client.get('/api/properties', query_string={'category': 'land'})
        assert _titles(response) == ['Terreno en Pachacamac']

    def test_price_range(self, client):
        response = client.get('/api/properties?minPrice=100000&maxPrice=200000')
        prices = [p['price'] for p in response.get_json()]
        assert sorted(prices) == [150000] * 5 + [185000]

    def test_search(self, client):
        response = client.get('/api/properties?search=miraflores')
        titles = _titles(response)
        assert len(titles) == 6
        assert 'Penthouse en Miraflores' in titles
        assert 'Casa Familiar en La Molina' not in titles

    def test_combined_filters(self, client):
        response = client.get('/api/properties', query_string={
            'type': 'rental', 'category': 'commercial', 'maxPrice': '1300',
        })
        assert _titles(response) == ['Local Comercial en San Borja']

    def test_blank_parameters_are_ignored(self, client):
        response = client.get('/api/properties?type=&category=&minPrice=&maxPrice=&search=')
        assert response.status_code == 200
        assert len(response.get_json()) == 14

    def test_no_match_is_empty_list(self, client):
        response = client.get('/api/properties?search=Arequipa')
        assert response.status_code == 200
        assert response.get_json() == []

    @pytest.mark.parametrize('query', ['minPrice=abc', 'maxPrice=10k', 'minPrice=-1', 'maxPrice=NaN'])
    def test_malformed_price_is_400(self, client, query):
        response = client.get(f'/api/properties?{query}')
        assert response.status_code == 400
        assert 'error' in response.get_json()

    def test_cors_header_on_api(self, client):
        response = client.get('/api/properties', headers={'Origin': 'http://localhost:5173'})
        assert response.headers.get('Access-Control-Allow-Origin') in ('*', 'http://localhost:5173')


class TestDetailEndpoint:

    def test_returns_record(self, client):
        listed = client.get('/api/properties?search=Barranco').get_json()[0]
        response = client.get(f"/api/properties/{listed['id']}")
        assert response.status_code == 200
        assert response.get_json() == listed

    def test_first_seeded_record(self, client):
        body = client.get('/api/properties/1').get_json()
        assert body['title'] == 'Apartamento Moderno en Miraflores'
        assert body['image_url'] == '/img/imagen1.png'

    @pytest.mark.parametrize('property_id', [
        '9999', '0', 'abc', '1.5', '-1', '1_0', '%D9%A1', '99999999999999999999',
    ])
    def test_unknown_id_is_404(self, client, property_id):
        response = client.get(f'/api/properties/{property_id}')
        assert response.status_code == 404
        assert response.get_json() == {'error': 'Propiedad no encontrada'}


class TestErrors:

    def test_unknown_api_path_is_json_404(self, client):
        response = client.get('/api/agents')
        assert response.status_code == 404
        assert 'error' in response.get_json()

    def test_write_methods_not_allowed(self, client):
        response = client.post('/api/properties', json={'title': 'x'})
        assert response.status_code == 405
        assert 'error' in response.get_json()

    def test_unexpected_error_is_500_without_detail(self, client, mocker):
        mocker.patch.object(PuntoHogarDatabase, 'list_properties',
                            side_effect=RuntimeError('disk I/O error at /var/secret'))
        response = client.get('/api/properties')
        assert response.status_code == 500
        assert response.get_json() == {'error': 'Error interno del servidor'}


def test_seed_can_be_disabled(app_config):
    from puntohogar.api.app import create_app
    from puntohogar.api.routes.properties import DB_EXTENSION_KEY

    app_config['database']['seed_on_startup'] = False
    application = create_app(app_config)
    try:
        assert application.test_client().get('/api/properties').get_json() == []
    finally:
        application.extensions[DB_EXTENSION_KEY].close()
