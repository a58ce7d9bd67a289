"""Tests for the process-wide configuration store."""
import pytest

from xing_api import Client, Configuration, configure, get_configuration

CREDENTIALS = ('consumer_key', 'consumer_secret', 'oauth_token', 'oauth_token_secret')


def test_configure_passes_settable_configuration():
    """Test configure hands a configuration object to the callback."""
    seen = []

    def setup(config):
        seen.append(config)
        for attr in CREDENTIALS:
            assert hasattr(config, attr)

    configure(setup)
    assert len(seen) == 1
    assert isinstance(seen[0], Configuration)


@pytest.mark.parametrize('attr', CREDENTIALS)
def test_client_without_configuration_has_empty_credentials(attr):
    """Test unset credentials read as None."""
    assert getattr(Client(), attr) is None


@pytest.mark.parametrize('attr', CREDENTIALS)
def test_client_reads_configured_defaults(attr):
    """Test new clients pick up configured defaults."""
    def setup(config):
        for name in CREDENTIALS:
            setattr(config, name, name)

    configure(setup)
    assert getattr(Client(), attr) == attr


def test_explicit_arguments_override_defaults():
    """Test constructor arguments win over configured defaults."""
    configure(lambda c: setattr(c, 'consumer_key', 'default_key'))
    client = Client(consumer_key='explicit_key')
    assert client.consumer_key == 'explicit_key'


def test_configure_twice_keeps_second_value():
    """Test configuring again overwrites earlier defaults."""
    configure(lambda c: setattr(c, 'oauth_token', 'first'))
    configure(lambda c: setattr(c, 'oauth_token', 'second'))
    assert get_configuration().oauth_token == 'second'
    assert Client().oauth_token == 'second'


def test_configure_keeps_fields_not_touched():
    """Test a later configure call only changes the fields it sets."""
    configure(lambda c: setattr(c, 'consumer_key', 'key'))
    configure(lambda c: setattr(c, 'consumer_secret', 'secret'))
    config = get_configuration()
    assert config.consumer_key == 'key'
    assert config.consumer_secret == 'secret'


def test_failing_callback_leaves_defaults_unchanged():
    """Test an exception inside configure does not apply partial changes."""
    configure(lambda c: setattr(c, 'consumer_key', 'kept'))

    def broken(config):
        config.consumer_key = 'lost'
        raise RuntimeError('boom')

    with pytest.raises(RuntimeError):
        configure(broken)
    assert get_configuration().consumer_key == 'kept'


def test_snapshot_is_detached():
    """Test mutating a snapshot does not change the stored defaults."""
    snapshot = get_configuration()
    snapshot.consumer_key = 'changed'
    assert get_configuration().consumer_key is None


def test_client_accepts_explicit_configuration():
    """Test an injected configuration is used instead of the global one."""
    configure(lambda c: setattr(c, 'consumer_key', 'global'))
    client = Client(config=Configuration(consumer_key='injected', timeout=5))
    assert client.consumer_key == 'injected'
    assert client.timeout == 5


def test_configuration_from_env(monkeypatch):
    """Test defaults can be seeded from environment variables."""
    monkeypatch.setenv('XING_CONSUMER_KEY', 'env_key')
    monkeypatch.setenv('XING_API_SITE', 'https://api.example.test')
    monkeypatch.setenv('XING_API_TIMEOUT', '2.5')
    config = Configuration.from_env()
    assert config.consumer_key == 'env_key'
    assert config.site == 'https://api.example.test'
    assert config.timeout == 2.5


def test_repr_hides_secrets():
    """Test secrets never show up in the repr."""
    config = Configuration(consumer_secret='s3cret')
    assert 's3cret' not in repr(config)


def test_malformed_timeout_names_the_variable(monkeypatch):
    """Test a non-numeric timeout raises an error naming the variable."""
    monkeypatch.setenv('XING_API_TIMEOUT', 'abc')
    with pytest.raises(ValueError, match='XING_API_TIMEOUT'):
        Configuration.from_env()
