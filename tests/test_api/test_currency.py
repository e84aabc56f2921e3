from decimal import Decimal

from domain.exceptions.currency import NetworkError


def test_get_currencies(client):
    response = client.get('/api/currencies')

    assert response.status_code == 200
    assert response.json() == {'currencies': ['EUR', 'INR', 'USD']}


def test_get_currencies_before_initialize_returns_503(make_client, controller):
    client = make_client(controller)

    response = client.get('/api/currencies')

    assert response.status_code == 503
    assert 'not been loaded' in response.json()['detail']


def test_get_state_after_initialize(client):
    response = client.get('/api/state')

    assert response.status_code == 200
    data = response.json()
    assert data['status'] == 'ready'
    assert data['source_currency'] == 'USD'
    assert data['target_currency'] == 'INR'
    assert data['rates_base'] == 'USD'
    assert data['result'] is None
    assert data['error'] is None


def test_convert_currency_success(client, mock_repository):
    request_data = {
        'from_currency': 'USD',
        'to_currency': 'INR',
        'amount': 10
    }

    response = client.post('/api/convert', json=request_data)

    assert response.status_code == 200
    data = response.json()
    assert data['status'] == 'ready'
    result = data['result']
    assert result['from_currency'] == 'USD'
    assert result['to_currency'] == 'INR'
    assert Decimal(result['converted_amount']) == Decimal('830')
    assert Decimal(result['exchange_rate']) == Decimal('83.0')
    assert result['display_amount'] == '₹830.00'
    assert result['display_rate'] == '1 USD = 83.0000 INR'
    mock_repository.fetch_rates.assert_not_called()


def test_convert_lowercase_currencies_normalized(client):
    response = client.post(
        '/api/convert', json={'from_currency': 'usd', 'to_currency': 'eur', 'amount': 100}
    )

    assert response.status_code == 200
    assert response.json()['result']['to_currency'] == 'EUR'


def test_convert_with_new_source_fetches_rates(client, mock_repository):
    response = client.post(
        '/api/convert', json={'from_currency': 'EUR', 'to_currency': 'USD', 'amount': 10}
    )

    assert response.status_code == 200
    assert Decimal(response.json()['result']['converted_amount']) == Decimal('11')
    assert response.json()['rates_base'] == 'EUR'
    mock_repository.fetch_rates.assert_awaited_once_with('EUR')


def test_convert_same_currency(client):
    response = client.post(
        '/api/convert', json={'from_currency': 'USD', 'to_currency': 'USD', 'amount': 5}
    )

    assert response.status_code == 200
    result = response.json()['result']
    assert Decimal(result['converted_amount']) == Decimal('5')
    assert Decimal(result['exchange_rate']) == Decimal('1')


def test_convert_zero_amount_returns_400(client):
    response = client.post(
        '/api/convert', json={'from_currency': 'USD', 'to_currency': 'INR', 'amount': 0}
    )

    assert response.status_code == 400
    assert response.json() == {
        'detail': 'Please enter a valid amount greater than zero.',
        'error': 'ValidationError',
    }


def test_convert_non_numeric_amount_returns_400(client, mock_repository):
    response = client.post(
        '/api/convert', json={'from_currency': 'USD', 'to_currency': 'INR', 'amount': 'ten'}
    )

    assert response.status_code == 400
    assert response.json()['error'] == 'ValidationError'
    assert response.json()['detail'] == 'Please enter a valid amount greater than zero.'
    mock_repository.fetch_rates.assert_not_called()


def test_convert_numeric_string_amount_is_accepted(client):
    response = client.post(
        '/api/convert', json={'from_currency': 'USD', 'to_currency': 'INR', 'amount': '10'}
    )

    assert response.status_code == 200
    assert Decimal(response.json()['result']['converted_amount']) == Decimal('830')


def test_convert_unknown_target_returns_404(client):
    response = client.post(
        '/api/convert', json={'from_currency': 'USD', 'to_currency': 'GBP', 'amount': 1}
    )

    assert response.status_code == 404
    assert response.json()['error'] == 'RateUnavailableError'
    assert 'GBP' in response.json()['detail']


def test_swap_currencies(client, mock_repository):
    client.post('/api/convert', json={'from_currency': 'USD', 'to_currency': 'INR', 'amount': 100})

    response = client.post('/api/swap')

    assert response.status_code == 200
    data = response.json()
    assert data['source_currency'] == 'INR'
    assert data['target_currency'] == 'USD'
    assert Decimal(data['result']['converted_amount']) == Decimal('1.2')
    mock_repository.fetch_rates.assert_awaited_once_with('INR')


def test_set_source_network_failure_returns_503(client, mock_repository):
    mock_repository.fetch_rates.side_effect = NetworkError('Request failed: ConnectError')

    response = client.put('/api/source', json={'currency': 'eur'})

    assert response.status_code == 503
    assert response.json()['detail'] == 'Failed to fetch rates for EUR: Request failed: ConnectError'
    assert response.json()['error'] == 'NetworkError'

    state = client.get('/api/state').json()
    assert state['status'] == 'failed'
    assert state['rates_base'] == 'USD'


def test_initialize_endpoint_retries_bootstrap(make_client, controller, mock_repository):
    mock_repository.discover_currencies.side_effect = [
        NetworkError('Request timed out after 10.0s'),
        mock_repository.discover_currencies.return_value,
    ]
    client = make_client(controller)

    first = client.post('/api/initialize')
    assert first.status_code == 503
    assert first.json()['detail'].startswith('Failed to load currency codes')

    second = client.post('/api/initialize')
    assert second.status_code == 200
    assert second.json()['source_currency'] == 'USD'
