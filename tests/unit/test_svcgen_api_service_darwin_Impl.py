"""Unit tests for the launchd plist rendering."""

import plistlib

import pytest

from svcgen.api.service._darwin._Impl import _Impl
from svcgen.api.service.RunType import RunType

pytestmark = pytest.mark.service

SESSION_TYPES = ["Aqua", "Background", "LoginWindow", "StandardIO", "System"]


def test_minimal_plist(make_service):
    service = make_service(lambda s: s.run(["/bin/foo"]))
    plist = service.to_plist()
    assert plist == {
        "Label": "com.svcgen.testball",
        "ProgramArguments": ["/bin/foo"],
        "RunAtLoad": True,
        "LimitLoadToSessionType": SESSION_TYPES,
    }
    assert list(plist)[:3] == ["Label", "ProgramArguments", "RunAtLoad"]
    assert list(plist)[-1] == "LimitLoadToSessionType"


def test_full_plist_key_order(make_service):
    def block(s):
        s.run([s.opt_bin / "foo", "start"])
        s.run_type(RunType.INTERVAL)
        s.interval(300)
        s.run_at_load(False)
        s.launch_only_once(True)
        s.macos_legacy_timers(True)
        s.restart_delay(8)
        s.process_type("background")
        s.working_dir(s.var)
        s.root_dir("/")
        s.input_path("/dev/null")
        s.log_path(s.var / "log" / "foo.log")
        s.error_log_path(s.var / "log" / "foo.err")
        s.environment_variables({"PATH": s.std_service_path_env()})
        s.keep_alive(True)
        s.sockets("tcp://127.0.0.1:9000")

    plist = make_service(block).to_plist()
    assert list(plist) == [
        "Label",
        "ProgramArguments",
        "RunAtLoad",
        "LaunchOnlyOnce",
        "LegacyTimers",
        "TimeOut",
        "ProcessType",
        "StartInterval",
        "WorkingDirectory",
        "RootDirectory",
        "StandardInPath",
        "StandardOutPath",
        "StandardErrorPath",
        "EnvironmentVariables",
        "KeepAlive",
        "Sockets",
        "LimitLoadToSessionType",
    ]
    assert plist["RunAtLoad"] is False
    assert plist["TimeOut"] == 8
    assert plist["ProcessType"] == "Background"
    assert plist["StartInterval"] == 300
    assert plist["StandardOutPath"] == "/usr/local/var/log/foo.log"
    assert plist["KeepAlive"] is True
    assert plist["Sockets"] == {
        "Listeners": {
            "SockNodeName": "127.0.0.1",
            "SockServiceName": "9000",
            "SockProtocol": "TCP",
            "SockFamily": "IPv4v6",
        }
    }


def test_false_flags_are_omitted(make_service):
    def block(s):
        s.run(["/bin/foo"])
        s.launch_only_once(False)
        s.macos_legacy_timers(False)

    plist = make_service(block).to_plist()
    assert "LaunchOnlyOnce" not in plist
    assert "LegacyTimers" not in plist


def test_interval_only_rendered_for_interval_run_type(make_service):
    plist = make_service(lambda s: s.interval(60)).to_plist()
    assert "StartInterval" not in plist


@pytest.mark.parametrize(
    ("keep_alive", "expected"),
    [
        ({"crashed": True}, {"Crashed": True}),
        ({"successful_exit": False}, {"SuccessfulExit": False}),
        ({"path": "/tmp/flag"}, {"PathState": "/tmp/flag"}),
        ({"always": True, "successful_exit": False, "crashed": True}, True),
        ({"successful_exit": True, "crashed": True, "path": "/tmp/flag"}, {"SuccessfulExit": True}),
        ({"crashed": False, "path": "/tmp/flag"}, {"Crashed": False}),
    ],
)
def test_keep_alive_shapes_are_exclusive(make_service, keep_alive, expected):
    plist = make_service(lambda s: s.keep_alive(keep_alive)).to_plist()
    assert plist["KeepAlive"] == expected


@pytest.mark.parametrize("keep_alive", [False, {}, {"always": False, "crashed": True}, {"path": ""}])
def test_keep_alive_omitted(make_service, keep_alive):
    plist = make_service(lambda s: s.keep_alive(keep_alive)).to_plist()
    assert "KeepAlive" not in plist


def test_crashed_keep_alive_is_kept_alive(make_service):
    service = make_service(lambda s: s.keep_alive({"crashed": True}))
    assert service.to_plist()["KeepAlive"] == {"Crashed": True}
    assert service.is_keep_alive() is True


def test_start_calendar_interval(make_service):
    def block(s):
        s.run_type(RunType.CRON)
        s.cron("30 4 * * 1")

    plist = make_service(block).to_plist()
    assert plist["StartCalendarInterval"] == {"Minute": 30, "Hour": 4, "Weekday": 1}


def test_start_calendar_interval_all_wildcards(make_service):
    def block(s):
        s.run_type("cron")
        s.cron("* * * * *")

    assert make_service(block).to_plist()["StartCalendarInterval"] == {}


def test_cron_ignored_without_cron_run_type(make_service):
    plist = make_service(lambda s: s.cron("@daily")).to_plist()
    assert "StartCalendarInterval" not in plist


def test_sockets_protocol_uppercased(make_service):
    plist = make_service(lambda s: s.sockets("tcp://0.0.0.0:8080")).to_plist()
    assert plist["Sockets"]["Listeners"]["SockProtocol"] == "TCP"


def test_plist_xml_keeps_order(make_service):
    service = make_service(lambda s: s.run(["/bin/foo"]))
    xml = service.to_plist_xml()
    assert xml.startswith(b"<?xml")
    assert xml.index(b"<key>Label</key>") < xml.index(b"<key>ProgramArguments</key>")
    assert plistlib.loads(xml) == service.to_plist()


def test_plist_xml_without_command(make_service):
    xml = make_service().to_plist_xml()
    assert b"ProgramArguments" not in xml


def test_create_plist_evaluates_block(make_service):
    service = make_service(lambda s: s.run(["/bin/foo"]))
    assert service.evaluated is False
    _Impl.create_plist(service)
    assert service.evaluated is True
