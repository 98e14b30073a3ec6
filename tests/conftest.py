"""
Pytest configuration and shared fixtures for configkey tests.
"""

import pytest
from configkey.config.schema import ConfigKeySettings, GeneratorConfig

PLIST_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" '
    '"http://www.apple.com/DTDs/PropertyList-1.0.dtd">\n'
)

EMPTY_HASH = "4f53cda18c2baa0c0354bb5f9a3ecbe5ed12ab4d8e11ba873c2f11161202b945"


def wrap_plist(body: str) -> str:
    """Wrap dict contents in a full plist document."""
    return PLIST_HEADER + '<plist version="1.0">\n<dict>\n' + body + "\n</dict>\n</plist>\n"


SIMPLE_BODY = """
    <key>showTaskBar</key>
    <true/>
    <key>allowWlan</key>
    <false/>
    <key>originatorVersion</key>
    <string>SEB_OSX_2.1.4_1A004</string>
    <key>startURL</key>
    <string>https://safeexambrowser.org/start</string>
    <key>browserWindowAllowReload</key>
    <true/>
    <key>URLFilterRules</key>
    <array>
        <dict>
            <key>regex</key>
            <false/>
            <key>action</key>
            <integer>1</integer>
            <key>active</key>
            <true/>
            <key>expression</key>
            <string>test.com</string>
        </dict>
    </array>
    <key>embeddedCertificates</key>
    <array/>
    <key>proxies</key>
    <dict>
        <key>HTTPEnable</key>
        <false/>
        <key>ExceptionsList</key>
        <array>
            <string>*.local</string>
        </array>
    </dict>
"""

SIMPLE_CANONICAL = (
    '{"allowWlan":false,'
    '"browserWindowAllowReload":true,'
    '"embeddedCertificates":[],'
    '"proxies":{"ExceptionsList":["*.local"],"HTTPEnable":false},'
    '"showTaskBar":true,'
    '"startURL":"https://safeexambrowser.org/start",'
    '"URLFilterRules":[{"action":1,"active":true,"expression":"test.com","regex":false}]}'
)


@pytest.fixture
def simple_xml():
    """Small .seb document including originatorVersion."""
    return wrap_plist(SIMPLE_BODY)


@pytest.fixture
def simple_xml_without_originator():
    """Same settings as simple_xml, without originatorVersion."""
    body = SIMPLE_BODY.replace(
        "    <key>originatorVersion</key>\n    <string>SEB_OSX_2.1.4_1A004</string>\n", ""
    )
    assert "originatorVersion" not in body
    return wrap_plist(body)


@pytest.fixture
def simple_xml_reordered():
    """Same settings as simple_xml with keys shuffled at every level."""
    return wrap_plist("""
    <key>proxies</key>
    <dict>
        <key>ExceptionsList</key>
        <array>
            <string>*.local</string>
        </array>
        <key>HTTPEnable</key>
        <false/>
    </dict>
    <key>URLFilterRules</key>
    <array>
        <dict>
            <key>expression</key>
            <string>test.com</string>
            <key>active</key>
            <true/>
            <key>action</key>
            <integer>1</integer>
            <key>regex</key>
            <false/>
        </dict>
    </array>
    <key>startURL</key>
    <string>https://safeexambrowser.org/start</string>
    <key>embeddedCertificates</key>
    <array/>
    <key>browserWindowAllowReload</key>
    <true/>
    <key>originatorVersion</key>
    <string>SEB_WIN_3.0.0</string>
    <key>allowWlan</key>
    <false/>
    <key>showTaskBar</key>
    <true/>
""")


@pytest.fixture
def simple_canonical():
    return SIMPLE_CANONICAL


@pytest.fixture
def empty_hash():
    return EMPTY_HASH


@pytest.fixture
def default_settings():
    """Provide default ConfigKeySettings."""
    return ConfigKeySettings()


@pytest.fixture
def generator_config():
    """Provide default GeneratorConfig."""
    return GeneratorConfig()


@pytest.fixture
def make_plist():
    """Build a full plist document from dict contents."""
    return wrap_plist
