"""fsprobe - filesystem change-notification calibration harness."""
