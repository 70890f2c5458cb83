from resource_api.api import main

if __name__ == "__main__":
    main()
