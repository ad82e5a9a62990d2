"""Host-side collaborators of the remote control.

Provides ``PairingProvider`` and ``DisplayDevice`` ABCs with concrete
implementations:

* ``SimulatedPairing`` -- fixture-based locomotives, no game required.
* ``ConsoleDisplay``   -- writes display text to a stream.
"""

from remote_stats.host.base import DisplayDevice, Pairing, PairingProvider

__all__ = ["DisplayDevice", "Pairing", "PairingProvider"]
