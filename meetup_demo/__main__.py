from meetup_demo.api.main import main

if __name__ == "__main__":
    main()
