from site_percolation.viz.cli import main

if __name__ == "__main__":
    main()
