from scripts.entry_points import localesync

if __name__ == "__main__":
    localesync()
