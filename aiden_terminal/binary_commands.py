"""Binary-analysis mode commands."""

from __future__ import annotations

from typing import Dict, List

from aiden_terminal.command_types import CommandResult, collect_descriptors, command, usage_error

_DISASSEMBLY = """\
0x00400526: push   rbp
0x00400527: mov    rbp, rsp
0x0040052a: sub    rsp, 0x10
0x0040052e: mov    DWORD PTR [rbp-0x4], edi
0x00400531: mov    eax, DWORD PTR [rbp-0x4]
0x00400534: cmp    eax, 0x1
0x00400537: jg     0x400540
0x00400539: mov    eax, 0x1
0x0040053e: jmp    0x40054a
0x00400540: mov    eax, DWORD PTR [rbp-0x4]
0x00400543: sub    eax, 0x1
0x00400546: mov    edi, eax
0x00400548: call   0x400526"""

_HEXDUMP = """\
00000000  7f 45 4c 46 02 01 01 00 00 00 00 00 00 00 00 00  |.ELF............|
00000010  02 00 3e 00 01 00 00 00 c0 a0 40 00 00 00 00 00  |..>.......@.....|
00000020  40 00 00 00 00 00 00 00 f0 01 00 00 00 00 00 00  |@...............|
00000030  00 00 00 00 40 00 38 00 09 00 40 00 1d 00 1c 00  |....@.8...@.....|
00000040  06 00 00 00 05 00 00 00 40 00 00 00 00 00 00 00  |........@.......|
00000050  40 00 40 00 00 00 00 00 40 00 40 00 00 00 00 00  |@.@.....@.@.....|"""

_STRINGS = (
    "GetProcAddress",
    "LoadLibraryA",
    "kernel32.dll",
    "VirtualAlloc",
    "CreateFileA",
    "WriteFile",
    "ReadFile",
    "ExitProcess",
    "MessageBoxA",
    "user32.dll",
    "http://malicious-server.com/beacon",
    "config.ini",
    "AES256",
    "initialize",
    "download_payload",
    "execute_shellcode",
)

_SYSCALL_TRACE = """\
[pid 1234] execve("/bin/ls", ["ls", "-la"], 0x7ffc2f33b5e0 /* 56 vars */) = 0
[pid 1234] brk(NULL)                     = 0x55a714a6c000
[pid 1234] access("/etc/ld.so.preload", R_OK) = -1 ENOENT
[pid 1234] openat(AT_FDCWD, "/etc/ld.so.cache", O_RDONLY|O_CLOEXEC) = 3
[pid 1234] fstat(3, {st_mode=S_IFREG|0644, st_size=107075, ...}) = 0
[pid 1234] mmap(NULL, 107075, PROT_READ, MAP_PRIVATE, 3, 0) = 0x7f29eb9e8000
[pid 1234] close(3)                      = 0
[pid 1234] openat(AT_FDCWD, "/lib/x86_64-linux-gnu/libselinux.so.1", O_RDONLY|O_CLOEXEC) = 3"""

_STATIC_ANALYSIS = """\
File type: ELF 64-bit LSB executable
Architecture: x86-64
Entry point: 0x4010a0
Sections: 29
  .text: 0x401000 - 0x4c1000 (size: 0xc0000)
  .data: 0x6c1000 - 0x6c2000 (size: 0x1000)
  .rodata: 0x6c2000 - 0x6c3000 (size: 0x1000)
Libraries: libc.so.6, libpthread.so.0, libdl.so.2
Compiler: GCC 9.3.0
Stripped: Yes
Obfuscated: Possibly
Packer detection: None detected
Potential malicious indicators: None found"""


@command(
    name="disasm",
    summary="Disassemble a binary file",
    usage="disasm <file> [--arch=<architecture>] [--format=<format>]",
    examples=["disasm binary.exe", "disasm firmware.bin --arch=arm", "disasm malware.exe --format=att"],
)
async def disasm(args: List[str], options: Dict[str, str]) -> CommandResult:
    if not args:
        return usage_error("Error: Binary file required. Usage: disasm <file> [options]")
    arch = options.get("arch", "x86_64")
    fmt = options.get("format", "intel")
    header = f"Disassembling {args[0]} (architecture: {arch}, format: {fmt})..."
    return CommandResult(output=f"{header}\n{_DISASSEMBLY}")


@command(
    name="hexdump",
    summary="Display file contents in hexadecimal and ASCII",
    usage="hexdump <file> [--offset=<bytes>] [--length=<bytes>]",
    examples=["hexdump binary.exe", "hexdump firmware.bin --offset=1024", "hexdump malware.exe --length=512"],
)
async def hexdump(args: List[str], options: Dict[str, str]) -> CommandResult:
    if not args:
        return usage_error("Error: File required. Usage: hexdump <file> [options]")
    length = options.get("length", "256")
    offset = options.get("offset", "0")
    header = f"Hexdump of {args[0]} (offset: {offset}, length: {length} bytes):"
    return CommandResult(output=f"{header}\n{_HEXDUMP}")


@command(
    name="strings",
    summary="Extract printable strings from a binary file",
    usage="strings <file> [--min=<length>]",
    examples=["strings binary.exe", "strings firmware.bin --min=8"],
)
async def strings(args: List[str], options: Dict[str, str]) -> CommandResult:
    if not args:
        return usage_error("Error: File required. Usage: strings <file> [options]")
    min_length = options.get("min", "4")
    header = f"Extracting strings from {args[0]} (minimum length: {min_length}):"
    return CommandResult(output="\n".join((header,) + _STRINGS))


@command(
    name="trace",
    summary="Trace system calls and signals of a process",
    usage="trace <process|command> [--type=<trace_type>]",
    examples=["trace ls -la", "trace --type=library firefox", "trace 1234"],
)
async def trace(args: List[str], options: Dict[str, str]) -> CommandResult:
    if not args:
        return usage_error("Error: Process or command required. Usage: trace <process|command> [options]")
    target = " ".join(args)
    trace_type = options.get("type", "syscall")
    return CommandResult(output=f"Tracing {target} (type: {trace_type})...\n{_SYSCALL_TRACE}")


@command(
    name="analyze",
    summary="Perform static analysis on a binary file",
    usage="analyze <file> [--depth=<analysis_depth>]",
    examples=["analyze binary.exe", "analyze firmware.bin --depth=deep"],
)
async def analyze(args: List[str], options: Dict[str, str]) -> CommandResult:
    if not args:
        return usage_error("Error: File required. Usage: analyze <file> [options]")
    depth = options.get("depth", "basic")
    return CommandResult(output=f"Analyzing {args[0]} (depth: {depth})...\n{_STATIC_ANALYSIS}")


COMMANDS = collect_descriptors(globals())


__all__ = ["COMMANDS"]
