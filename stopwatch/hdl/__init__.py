"""HDL output for designs."""

from stopwatch.hdl.verilog import emit_verilog, write_verilog

__all__ = ["emit_verilog", "write_verilog"]
