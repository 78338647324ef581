from shifts_logger.console.menus import main

if __name__ == "__main__":
    main()
