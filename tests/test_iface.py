import socket

import pytest

from sysdemos.iface import (
    InterfaceInfo,
    format_interface,
    interface_address,
    interface_netmask,
    interface_state,
    list_interfaces,
    main,
)

MISSING = "nosuchif0"


def test_format_interface_up_with_addresses():
    info = InterfaceInfo("eth0", 2, True, "10.0.0.5", "255.255.255.0")
    assert format_interface(info) == (
        "eth0        Index: 2  State: Up\n"
        "            Addr: 10.0.0.5  Mask: 255.255.255.0\n\n"
    )


def test_format_interface_down_without_addresses():
    text = format_interface(InterfaceInfo("wlan0", 3, False))
    assert text.splitlines()[0].endswith("State: Down")
    assert "Addr: none  Mask: none" in text


def test_missing_interface_state_raises():
    with pytest.raises(OSError):
        interface_state(MISSING)


def test_missing_interface_has_no_address_or_mask():
    assert interface_address(MISSING) is None
    assert interface_netmask(MISSING) is None


@pytest.mark.parametrize("name", ["", "x" * 16])
def test_invalid_names_raise(name):
    with pytest.raises(ValueError):
        interface_state(name)


def test_list_interfaces_matches_system_listing():
    infos = list_interfaces()
    expected = sorted(socket.if_nameindex())
    assert [(info.index, info.name) for info in infos] == expected
    indices = [info.index for info in infos]
    assert indices == sorted(indices)


def test_main_prints_each_interface(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Index: ") == len(socket.if_nameindex())