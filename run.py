from kraken_seed.cli import main

# Same entry point as the installed `kraken-seed` script
if __name__ == "__main__":
    main()
