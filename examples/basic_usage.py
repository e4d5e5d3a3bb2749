#!/usr/bin/env python3
"""Basic usage example"""

from logfile_module import LogEvent, LogFile, Style

def main():
    # The file and its directory are created on first use
    log = LogFile("logs/example.log")
    log.on(LogEvent.CREATE, lambda n: print(f"created {n.payload}"))

    # Print styled entries and write them raw to the file
    log.log({"title": "BOOT", "message": "Application started"})
    log.log({
        "title": "WARN",
        "title_alignment": "RIGHT",
        "title_style": [Style.BOLD, [48, 2, 255, 127, 0]],
        "message": "Disk almost full",
    })

    # Write only, without printing
    log.write({"title": "DEBUG", "message": "plain entry", "raw": True})

    print(log.content, end="")

    # Close and remove the file
    log.close()
    log.delete()

if __name__ == "__main__":
    main()
