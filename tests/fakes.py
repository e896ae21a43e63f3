"""
macOS command output fixtures and a fake process runner.
"""
from splitr.core.errors import ExecutionFailedError

# Literal output captured from macOS 14 for the commands the executor runs
ROUTE_GET_DEFAULT_OUTPUT = """   route to: default
destination: default
       mask: default
    gateway: 192.168.1.1
  interface: en0
      flags: <UP,GATEWAY,DONE,STATIC,PRCLONING,GLOBAL>
 recvpipe  sendpipe  ssthresh  rtt,msec    rttvar  hopcount      mtu     expire
       0         0         0         0         0         0      1500         0
"""

NETWORK_SERVICE_ORDER_OUTPUT = """An asterisk (*) denotes that a network service is disabled.
(1) USB 10/100/1000 LAN
(Hardware Port: USB 10/100/1000 LAN, Device: en7)

(2) Wi-Fi
(Hardware Port: Wi-Fi, Device: en0)

(3) Office VPN
(Hardware Port: L2TP, Device: )

(4) Thunderbolt Bridge
(Hardware Port: Thunderbolt Bridge, Device: bridge0)
"""

NETWORK_INFO_OUTPUT = """DHCP Configuration
IP address: 192.168.1.34
Subnet mask: 255.255.255.0
Router: 192.168.1.1
Client ID:
IPv6: Automatic
IPv6 IP address: none
IPv6 Router: none
Wi-Fi ID: a4:83:e7:00:00:01
"""

SCUTIL_NC_LIST_OUTPUT = """Available network connection services in the current set (*=enabled):
* (Connected)      3C1E5B0A-0000-4000-8000-000000000001 PPP --> L2TP          "Office VPN"                     [PPP:L2TP]
* (Disconnected)   3C1E5B0A-0000-4000-8000-000000000002 PPP --> L2TP          "Home VPN"                       [PPP:L2TP]
* (Disconnected)   3C1E5B0A-0000-4000-8000-000000000003 PPP --> PPTP          "Legacy VPN"                     [PPP:PPTP]
"""


class FakeRunner:
    """
    Process runner double keyed by (executable, first argument).

    Unknown commands succeed with empty output. Every call is recorded in
    ``calls`` as a tuple of executable and arguments.
    """

    def __init__(self):
        self.outputs = {}
        self.errors = {}
        self.calls = []

    def set_output(self, name, first_arg, output):
        if isinstance(output, str):
            output = output.split("\n")
        self.outputs[(name, first_arg)] = list(output)
        self.errors.pop((name, first_arg), None)

    def set_error(self, name, first_arg, detail="exit status 1"):
        self.errors[(name, first_arg)] = detail

    def run(self, name, *args):
        self.calls.append((name, *args))
        key = (name, args[0] if args else None)
        if key in self.errors:
            raise ExecutionFailedError(" ".join([name, *args]), self.errors[key], returncode=1)
        return list(self.outputs.get(key, [""]))

    def calls_to(self, name, first_arg):
        return [call for call in self.calls if call[0] == name and len(call) > 1 and call[1] == first_arg]
