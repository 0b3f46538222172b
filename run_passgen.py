from passgen import generate_passwords, DEFAULT_CONFIG

def main() -> None:
    passwords = generate_passwords(1, DEFAULT_CONFIG.password_length_default, DEFAULT_CONFIG.alphabet)
    print("\n[Password Generator]")
    print(f"Generated password: {passwords[0]}\n")

if __name__ == "__main__":
    main()
